"""Per-invocation state shared by every CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field

import click

from watchstore.application.dto import Caller
from watchstore.config import Settings
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.infrastructure.bootstrap import unit_of_work_factory


@dataclass
class CliContext:
    caller: Caller
    settings: Settings
    _uow_factory: UnitOfWorkFactory | None = field(default=None, repr=False)

    @property
    def uow_factory(self) -> UnitOfWorkFactory:
        if self._uow_factory is None:
            self._uow_factory = unit_of_work_factory(self.settings)
        return self._uow_factory


pass_context = click.make_pass_decorator(CliContext)
