"""GET /v1/tools - Browse the rental tool catalog"""

from fastapi import APIRouter, Depends, HTTPException

from tool_rental.api.v1.schemas import ToolListResponse, ToolResponse
from tool_rental.api.dependencies import get_tool_catalog
from tool_rental.infrastructure.catalog import ToolCatalog

router = APIRouter()


@router.get("/tools", response_model=ToolListResponse)
def list_tools(catalog: ToolCatalog = Depends(get_tool_catalog)):
    """List every rentable tool with its charge policy"""
    return ToolListResponse(tools=[ToolResponse.from_tool(tool) for tool in catalog.list_tools()])


@router.get("/tools/{tool_code}", response_model=ToolResponse)
def get_tool(tool_code: str, catalog: ToolCatalog = Depends(get_tool_catalog)):
    tool = catalog.lookup(tool_code)

    if tool is None:
        raise HTTPException(status_code=404, detail=f'Tool code "{tool_code}" not found.')

    return ToolResponse.from_tool(tool)
