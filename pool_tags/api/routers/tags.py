from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pool_tags.api.deps import get_graph_api_key, get_return_tags_use_case
from pool_tags.api.schemas.tags import ContractTagResponse
from pool_tags.application.ports.tag_service_port import TagServicePort
from pool_tags.domain.exceptions import TagFetchError, UnsupportedChainError


router = APIRouter()


@router.get("/v1/tags/{chain_id}", response_model=list[ContractTagResponse])
def list_tags(
    chain_id: str,
    api_key: str = Depends(get_graph_api_key),
    use_case: TagServicePort = Depends(get_return_tags_use_case),
):
    try:
        records = use_case.return_tags(chain_id=chain_id, api_key=api_key)
    except UnsupportedChainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TagFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [ContractTagResponse.model_validate(record) for record in records]
