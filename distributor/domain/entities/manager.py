"""Manager entity — an employee who services clients."""

from __future__ import annotations

from dataclasses import dataclass, field

from distributor.domain.entities.client import Client


@dataclass(eq=False)
class Manager:
    id: str
    office_id: str
    initial_client_count: int = 0
    is_vip: bool = False
    clients: list[Client] = field(default_factory=list)

    @property
    def client_count(self) -> int:
        """Current load: clients carried over plus clients assigned in this run."""
        return self.initial_client_count + len(self.clients)

    def assign(self, client: Client) -> None:
        self.clients.append(client)
