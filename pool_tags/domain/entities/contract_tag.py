from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContractTag:
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str

    def to_record(self) -> dict[str, str]:
        return {
            "Contract Address": self.contract_address,
            "Public Name Tag": self.public_name_tag,
            "Project Name": self.project_name,
            "UI/Website Link": self.ui_website_link,
            "Public Note": self.public_note,
        }
