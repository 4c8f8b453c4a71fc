"""Project Service — projectList, projectCreate, projectShow, projectUpdate, projectDelete.

Invariants:
    - projectCreate requires Owner on the owning team, then inserts the project
      and the creator's Owner membership in one transaction
    - List/show only return projects the caller is a project member of
    - Update/delete require Owner on the project; the statement re-checks it
    - Team membership alone grants nothing on a project
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update

from workbench.core.capabilities import roles_with
from workbench.core.domain_types import Action, IdentityId, Role, Scope
from workbench.core.errors import NotFoundOrDeniedError
from workbench.models.project import Project
from workbench.schemas.project import ProjectCreate, ProjectFilter, ProjectUpdate
from workbench.schemas.validate import decode
from workbench.services.hierarchy import parent_scope, project_clause
from workbench.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class ProjectService(ResourceService):
    """Membership-scoped project CRUD."""

    async def list_projects(
        self, identity: IdentityId, filters: ProjectFilter | Mapping[str, Any],
    ) -> list[Project]:
        """No pagination: returns every matching project."""
        criteria = decode(ProjectFilter, filters)
        query = (
            select(Project)
            .where(Project.team_id == criteria.team_id)
            .where(project_clause(identity))
        )
        if criteria.name:
            query = query.where(Project.name.contains(criteria.name, autoescape=True))
        if criteria.visibility:
            query = query.where(Project.visibility == criteria.visibility.value)
        return await self._fetch_all(query.order_by(Project.created_at))

    async def create_project(
        self, identity: IdentityId, payload: ProjectCreate | Mapping[str, Any],
    ) -> Project:
        body = decode(ProjectCreate, payload)
        project = Project(
            name=body.name,
            description=body.description,
            team_id=body.team_id,
            visibility=body.visibility.value,
        )
        await self.guard.require(
            identity, parent_scope(project), Action.CREATE_PROJECT,
        )
        async with self._atomic():
            self.db.add(project)
            await self.db.flush()
            await self.memberships.create_membership(
                identity, Scope.project(project.id), Role.OWNER,
            )
        logger.info(
            f"Project {project.id} created",
            extra={"identity": identity, "scope_type": "team", "scope_id": str(project.team_id)},
        )
        return project

    async def show_project(
        self, identity: IdentityId, project_id: UUID,
    ) -> Project:
        await self.guard.require(identity, Scope.project(project_id), Action.READ)
        project = await self._fetch_one(
            select(Project)
            .where(Project.id == project_id)
            .where(project_clause(identity))
        )
        if project is None:
            raise NotFoundOrDeniedError("Project", str(project_id))
        return project

    async def update_project(
        self, identity: IdentityId, project_id: UUID,
        payload: ProjectUpdate | Mapping[str, Any],
    ) -> bool:
        body = decode(ProjectUpdate, payload)
        await self.guard.require(
            identity, Scope.project(project_id), Action.UPDATE_PROJECT,
        )
        async with self._atomic():
            result = await self.db.execute(
                update(Project)
                .where(Project.id == project_id)
                .where(project_clause(identity, roles_with(Action.UPDATE_PROJECT)))
                .values(
                    name=body.name,
                    description=body.description,
                    visibility=body.visibility.value,
                    updated_at=datetime.now(timezone.utc),
                )
                .execution_options(synchronize_session=False)
            )
            self._expect_rows(result, "Project", project_id)
        logger.info(f"Project {project_id} updated", extra={"identity": identity})
        return True

    async def delete_project(
        self, identity: IdentityId, project_id: UUID,
    ) -> bool:
        await self.guard.require(
            identity, Scope.project(project_id), Action.DELETE_PROJECT,
        )
        async with self._atomic():
            result = await self.db.execute(
                delete(Project)
                .where(Project.id == project_id)
                .where(project_clause(identity, roles_with(Action.DELETE_PROJECT)))
                .execution_options(synchronize_session=False)
            )
            self._expect_rows(result, "Project", project_id)
        logger.info(f"Project {project_id} deleted", extra={"identity": identity})
        return True
