"""
Google Sheets Connector - Request Models
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .utils import build_gviz_params, build_gviz_url


class GvizQuery(BaseModel):
    """공개 시트 gviz 조회 요청"""

    sheet_id: str = Field(..., description="Google Sheets ID")
    gid: Optional[str] = Field(default=None, description="탭 내부 ID (탭 이름보다 우선)")
    sheet_name: Optional[str] = Field(default="Sheet1", description="탭 이름")
    query: str = Field(default="select *", description="gviz 쿼리")

    model_config = ConfigDict(frozen=True)

    @property
    def url(self) -> str:
        return build_gviz_url(self.sheet_id)

    @property
    def params(self) -> Dict[str, str]:
        return build_gviz_params(gid=self.gid, sheet_name=self.sheet_name, query=self.query)

    def for_tab(self, gid: str) -> "GvizQuery":
        """Same spreadsheet and query, different tab."""
        return self.model_copy(update={"gid": gid})
