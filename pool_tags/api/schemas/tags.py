from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContractTagResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contract_address: str = Field(alias="Contract Address")
    public_name_tag: str = Field(alias="Public Name Tag")
    project_name: str = Field(alias="Project Name")
    ui_website_link: str = Field(alias="UI/Website Link")
    public_note: str = Field(alias="Public Note")
