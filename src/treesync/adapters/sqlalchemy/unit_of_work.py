"""SQLAlchemy-backed unit of work for tree reconciliation.

The adapter keeps one engine per process. ``startup`` migrates the schema to
head before any session is handed out; every ``SqlAlchemyTreeUnitOfWork`` then
wraps a single session, so a reconciliation run either commits all of its
mutations or none of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from treesync.config.storage import get_database_uri
from treesync.domain.ports.unit_of_work import TreeRepositories

from .migrations import upgrade_head
from .repositories import SqlAlchemyTreeRepository

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the tree database is used before ``startup`` or reconfigured implicitly."""


@dataclass(slots=True)
class _DatabaseState:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None

    def attach(self, engine: Engine) -> None:
        self.engine = engine
        self.sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def detach(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.sessions = None

    def open_session(self) -> Session:
        if self.sessions is None:
            raise StartupError(
                "Tree database not initialised; call startup() before opening a unit of work."
            )
        return self.sessions()


_STATE = _DatabaseState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Connect to the tree database and bring its schema to head."""

    if _STATE.engine is not None and not force:
        raise StartupError("Tree database already initialised. Pass force=True to reconfigure.")

    resolved_engine = engine or create_engine(database_uri or get_database_uri())
    upgrade_head(engine=resolved_engine)
    _STATE.attach(resolved_engine)
    log.debug("Tree database ready at %s", resolved_engine.url.render_as_string())


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the engine; a later unit of work needs a new ``startup``."""

    _STATE.detach()


class SqlAlchemyTreeUnitOfWork:
    """One session around a reconciliation run.

    Leaving the block with an exception rolls back; leaving it without
    ``commit`` discards the changes when the session closes.
    """

    def __init__(self) -> None:
        self._session: Session | None = None
        self._repositories: TreeRepositories | None = None

    def __enter__(self) -> SqlAlchemyTreeUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work session already open")
        self._session = _STATE.open_session()
        self._repositories = TreeRepositories(trees=SqlAlchemyTreeRepository(self._session))
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not open")
        return self._session

    @property
    def repositories(self) -> TreeRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from treesync.domain.ports.unit_of_work import TreeUnitOfWork

    _uow_check: TreeUnitOfWork = SqlAlchemyTreeUnitOfWork()
