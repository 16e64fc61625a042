"""Agent repository - profiles, property assignments, sales performance."""

from typing import Optional, Union

from ulid import ULID

from estate_admin.data.agents import initial_agents
from estate_admin.models.agent import (
    Agent,
    AgentCertification,
    AgentCreate,
    AgentDocument,
    AgentSpecialization,
    AgentStatus,
    AgentUpdate,
    MonthlyStat,
    PerformanceUpdate,
    ScheduleUpdate,
    Transaction,
)
from estate_admin.models.common import parse_model, utc_now
from estate_admin.models.user import UserRole
from estate_admin.services.entity_store import EntityStore, KeyValueBackend
from estate_admin.services.user_repository import UserRepository
from estate_admin.utils.errors import AgentValidationError
from estate_admin.utils.logging import get_structured_logger
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__, collection=StoreConfig.AGENTS_KEY)


def generate_agent_id() -> str:
    """Generate a text-based agent ID (ULID format)."""
    return str(ULID())


def month_key(value) -> str:
    """Bucket key ("YYYY-MM") for a date."""
    return value.strftime("%Y-%m")


class AgentRepository:
    """CRUD over agent profiles.

    Listing counters only move through ``assign_property`` and
    ``unassign_property``; sales counters only through ``add_transaction``.
    """

    def __init__(self, store: EntityStore[Agent], users: UserRepository):
        self.store = store
        self.users = users

    @classmethod
    def from_backend(cls, backend: KeyValueBackend, users: UserRepository, seed=initial_agents) -> "AgentRepository":
        return cls(EntityStore(backend, StoreConfig.AGENTS_KEY, Agent, seed), users)

    async def get_all(self) -> list[Agent]:
        return await self.store.load()

    async def get_by_id(self, agent_id: str) -> Optional[Agent]:
        for agent in await self.store.load():
            if agent.id == agent_id:
                return agent
        return None

    async def get_by_user_id(self, user_id: str) -> Optional[Agent]:
        for agent in await self.store.load():
            if agent.user_id == user_id:
                return agent
        return None

    async def get_by_specialization(self, specialization: Union[AgentSpecialization, str]) -> list[Agent]:
        return [a for a in await self.store.load() if specialization in a.specializations]

    async def get_by_status(self, status: Union[AgentStatus, str]) -> list[Agent]:
        return [a for a in await self.store.load() if a.status == status]

    async def create(self, data: Union[AgentCreate, dict]) -> Agent:
        """
        Create an agent profile.

        Raises AgentValidationError when the referenced user is missing or
        does not hold the Agent role. Nothing is written in that case.
        """
        data = parse_model(AgentCreate, data)

        user = await self.users.get_by_id(data.user_id)
        if user is None:
            raise AgentValidationError(f"User not found: {data.user_id}")
        if user.role != UserRole.AGENT:
            raise AgentValidationError(
                f"User {data.user_id} has role {user.role.value}, expected {UserRole.AGENT.value}"
            )

        agents = await self.store.load()
        now = utc_now()
        agent = Agent(
            id=generate_agent_id(),
            **data.model_dump(),
            created_at=now,
            updated_at=now,
        )
        agents.append(agent)
        await self.store.save(agents)

        logger.info("Agent created", agent_id=agent.id, user_id=agent.user_id)
        return agent

    async def update(self, agent_id: str, patch: Union[AgentUpdate, dict]) -> Optional[Agent]:
        patch = parse_model(AgentUpdate, patch)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)

        def apply(agent: Agent) -> None:
            for field in changes:
                setattr(agent, field, getattr(patch, field))

        agent = await self._mutate(agent_id, apply)
        if agent is not None:
            logger.info("Agent updated", agent_id=agent_id, fields=sorted(changes))
        return agent

    async def update_status(self, agent_id: str, status: Union[AgentStatus, str]) -> Optional[Agent]:
        return await self.update(agent_id, {"status": status})

    async def delete(self, agent_id: str) -> bool:
        agents = await self.store.load()
        remaining = [a for a in agents if a.id != agent_id]
        if len(remaining) == len(agents):
            logger.debug("Agent not found for delete", agent_id=agent_id)
            return False

        await self.store.save(remaining)
        logger.info("Agent deleted", agent_id=agent_id)
        return True

    async def assign_property(self, agent_id: str, property_id: str) -> Optional[Agent]:
        """Assign a listing. Re-assigning the same listing changes nothing."""
        property_id = str(property_id)

        def apply(agent: Agent) -> None:
            if property_id in agent.assigned_properties:
                return
            agent.assigned_properties.append(property_id)
            agent.performance.active_listings += 1
            agent.performance.total_listings += 1

        return await self._mutate(agent_id, apply)

    async def unassign_property(self, agent_id: str, property_id: str) -> Optional[Agent]:
        property_id = str(property_id)

        def apply(agent: Agent) -> None:
            if property_id not in agent.assigned_properties:
                return
            agent.assigned_properties.remove(property_id)
            agent.performance.active_listings = max(agent.performance.active_listings - 1, 0)

        return await self._mutate(agent_id, apply)

    async def add_certification(
        self, agent_id: str, certification: Union[AgentCertification, dict]
    ) -> Optional[Agent]:
        certification = parse_model(AgentCertification, certification)

        def apply(agent: Agent) -> None:
            if any(c.name == certification.name for c in agent.certifications):
                return
            agent.certifications.append(certification)

        return await self._mutate(agent_id, apply)

    async def add_document(self, agent_id: str, document: Union[AgentDocument, dict]) -> Optional[Agent]:
        document = parse_model(AgentDocument, document)
        return await self._mutate(agent_id, lambda agent: agent.documents.append(document))

    async def update_performance(
        self, agent_id: str, partial: Union[PerformanceUpdate, dict]
    ) -> Optional[Agent]:
        """Set rating, response time or success rate. Counters are rejected."""
        partial = parse_model(PerformanceUpdate, partial)
        changes = partial.model_dump(exclude_unset=True, exclude_none=True)

        def apply(agent: Agent) -> None:
            for field, value in changes.items():
                setattr(agent.performance, field, value)

        return await self._mutate(agent_id, apply)

    async def update_schedule(self, agent_id: str, partial: Union[ScheduleUpdate, dict]) -> Optional[Agent]:
        partial = parse_model(ScheduleUpdate, partial)

        def apply(agent: Agent) -> None:
            for field in partial.model_fields_set:
                setattr(agent.schedule, field, getattr(partial, field))

        return await self._mutate(agent_id, apply)

    async def add_transaction(self, agent_id: str, txn: Union[Transaction, dict]) -> Optional[Agent]:
        """Record a closed deal and roll it into the matching monthly bucket."""
        txn = parse_model(Transaction, txn)
        key = month_key(txn.transaction_date)

        def apply(agent: Agent) -> None:
            performance = agent.performance
            performance.sold_properties += 1
            performance.total_sales_value += txn.value
            agent.portfolio.past_transactions.append(txn)

            bucket = next((s for s in performance.monthly_stats if s.month == key), None)
            if bucket is None:
                bucket = MonthlyStat(month=key)
                performance.monthly_stats.append(bucket)
                performance.monthly_stats.sort(key=lambda s: s.month)
            bucket.sales_count += 1
            bucket.sales_value += txn.value

        agent = await self._mutate(agent_id, apply)
        if agent is not None:
            logger.info(
                "Agent transaction recorded",
                agent_id=agent_id,
                property_id=txn.property_id,
                month=key,
                value=txn.value
            )
        return agent

    async def get_top_performers(self, limit: int = 5) -> list[Agent]:
        """Agents by total sales value, highest first; ties keep collection order."""
        agents = await self.store.load()
        ranked = sorted(agents, key=lambda a: a.performance.total_sales_value, reverse=True)
        return ranked[:limit]

    async def _mutate(self, agent_id: str, apply) -> Optional[Agent]:
        """Load, apply a change to one agent, bump updated_at and save."""
        agents = await self.store.load()
        for agent in agents:
            if agent.id == agent_id:
                apply(agent)
                agent.updated_at = utc_now()
                await self.store.save(agents)
                return agent

        logger.debug("Agent not found", agent_id=agent_id)
        return None
