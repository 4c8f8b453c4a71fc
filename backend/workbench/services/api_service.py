"""API Service — apiList, apiCreate.

Invariants:
    - apiCreate requires Owner or Maintainer on the TARGET project (project_id
      of the payload), not on an arbitrary project of the caller
    - apiList only returns APIs of projects the caller is a member of;
      a non-member gets an empty list
    - Opaque payload fields (params/body/headers/authorization, scripts) stored verbatim
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select

from workbench.core.domain_types import Action, IdentityId
from workbench.models.api import Api
from workbench.schemas.api import ApiCreate, ApiFilter
from workbench.schemas.validate import decode
from workbench.services.hierarchy import api_clause, parent_scope
from workbench.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class ApiService(ResourceService):
    """Project-scoped API definitions."""

    async def list_apis(
        self, identity: IdentityId, filters: ApiFilter | Mapping[str, Any],
    ) -> list[Api]:
        criteria = decode(ApiFilter, filters)
        query = (
            select(Api)
            .where(Api.project_id == criteria.project_id)
            .where(api_clause(identity))
        )
        if criteria.name:
            query = query.where(Api.name.contains(criteria.name, autoescape=True))
        return await self._fetch_all(query.order_by(Api.order, Api.created_at))

    async def create_api(
        self, identity: IdentityId, payload: ApiCreate | Mapping[str, Any],
    ) -> Api:
        body = decode(ApiCreate, payload)
        api = Api(
            project_id=body.project_id,
            name=body.name,
            description=body.description,
            endpoint=body.endpoint,
            method=body.method.value,
            params=body.params,
            body=body.body,
            headers=body.headers,
            authorization=body.authorization,
            pre_request_script=body.pre_request_script,
            post_response_script=body.post_response_script,
            tags=list(body.tags),
            versions=list(body.versions),
            order=body.order,
            status=body.status.value if body.status else None,
        )
        await self.guard.require(identity, parent_scope(api), Action.CREATE_API)
        async with self._atomic():
            self.db.add(api)
            await self.db.flush()
        logger.info(
            f"API {api.id} created",
            extra={
                "identity": identity,
                "scope_type": "project",
                "scope_id": str(api.project_id),
            },
        )
        return api
