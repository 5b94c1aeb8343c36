"""BackendClient — sends requests and routes the replies to callbacks."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from .adapters.decorators.logging_transport import LoggingTransport
from .adapters.http.transport import HttpxTransport
from .correlation import correlation_scope
from .factory import ActorRequestFactory
from .messages.ack import Error, Ok
from .primitives.exceptions import ClientError, TransportError
from .serialization import MessageSerializer
from .utils import invoke_callback, noop

if TYPE_CHECKING:
    from types import TracebackType

    from .config import ClientSettings
    from .context import ContextBuilder
    from .domain.message import TypedMessage
    from .domain.type_url import TypeUrl
    from .messages.ack import Outcome
    from .messages.command import Command
    from .messages.query import Query
    from .ports.subscription import ISubscriptionClient, ItemCallback
    from .ports.transport import ITransport, TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_QUERY_PATH = "/query"
DEFAULT_COMMAND_PATH = "/command"

_MAX_DETAIL_LENGTH = 500

#: Receives an error: a :class:`ClientError` or the backend's error details.
ErrorCallback = Callable[[Any], Awaitable[None] | None]
#: Receives nothing; invoked once when a command is acknowledged.
SuccessCallback = Callable[[], Awaitable[None] | None]
#: Receives the rejection details of a refused command.
RejectionCallback = Callable[[Any], Awaitable[None] | None]


class BackendClient:
    """The client of the application backend.

    Orchestrates the transport, the real-time subscription client and the
    :class:`~spine_web_client.factory.ActorRequestFactory`.

    Queries are answered with a subscription handle; the matching items are
    then pushed by *subscriptions* to the data callback for as long as the
    store keeps sending them. Commands are answered with a single
    acknowledgement that triggers exactly one of the success, error or
    rejection callbacks.

    Failures are never raised out of :meth:`fetch_all`, :meth:`fetch_by_id`
    or :meth:`send_command`; they reach the error callback instead. Only
    malformed input to the factory raises
    :class:`~spine_web_client.primitives.exceptions.ConstructionError`, and
    exceptions raised by the callbacks themselves propagate unchanged.

    Parameters
    ----------
    transport:
        :class:`~spine_web_client.ports.transport.ITransport` to the backend.
    subscriptions:
        :class:`~spine_web_client.ports.subscription.ISubscriptionClient`
        reading query results.
    request_factory:
        Builds the requests on behalf of the actor.
    query_path / command_path:
        Backend endpoints for queries and commands.
    """

    def __init__(
        self,
        transport: ITransport,
        subscriptions: ISubscriptionClient,
        request_factory: ActorRequestFactory,
        *,
        query_path: str = DEFAULT_QUERY_PATH,
        command_path: str = DEFAULT_COMMAND_PATH,
        serializer: MessageSerializer | None = None,
    ) -> None:
        self._transport = transport
        self._subscriptions = subscriptions
        self._request_factory = request_factory
        self._query_path = query_path
        self._command_path = command_path
        self._serializer = serializer or MessageSerializer()
        self._owns_transport = False

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        actor: str,
        subscriptions: ISubscriptionClient,
        context_builder: ContextBuilder | None = None,
    ) -> BackendClient:
        """Build a client talking HTTP to ``settings.base_url``.

        The client owns the created transport and closes it in :meth:`aclose`.
        """
        transport: ITransport = HttpxTransport(
            settings.base_url, timeout=settings.timeout_seconds
        )
        if settings.log_requests:
            transport = LoggingTransport(transport)
        client = cls(
            transport,
            subscriptions,
            ActorRequestFactory(actor, context_builder=context_builder),
            query_path=settings.query_path,
            command_path=settings.command_path,
        )
        client._owns_transport = True
        return client

    @property
    def request_factory(self) -> ActorRequestFactory:
        return self._request_factory

    # ── Queries ──────────────────────────────────────────────────

    async def fetch_all(
        self,
        type_url: TypeUrl | str,
        on_data: ItemCallback,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Fetch all the entities of the given type.

        Each entity is passed to *on_data* as it arrives. Without *on_error*
        a failed fetch is dropped. Exceptions raised by *on_data* are not
        failures of the fetch and propagate to the caller.
        """
        query = self._request_factory.query_all(type_url)
        await self._fetch(query, on_data, on_error)

    async def fetch_by_id(
        self,
        type_url: TypeUrl | str,
        id: TypedMessage[Any],
        on_data: ItemCallback,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Fetch the single entity of the given type with the given *id*."""
        query = self._request_factory.query_by_id(type_url, id)
        await self._fetch(query, on_data, on_error)

    # ── Commands ─────────────────────────────────────────────────

    async def send_command(
        self,
        message: TypedMessage[Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        on_rejection: RejectionCallback,
    ) -> None:
        """Send the given command message to the backend.

        *on_success* gets no arguments, *on_error* gets either a
        :class:`ClientError` or the backend's error details, *on_rejection*
        gets the rejection details. Exactly one of them is called, after
        the acknowledgement has been read in full.
        """
        command = self._request_factory.command(message)
        command_id = command.message.id.uuid

        with correlation_scope():
            try:
                outcome = await self._post_command(command)
            except Exception as e:  # noqa: BLE001
                error = self._as_client_error(e)
                logger.warning("Command %s failed: %s", command_id, error)
                await invoke_callback(on_error, error)
                return

            if isinstance(outcome, Ok):
                logger.debug("Command %s acknowledged", command_id)
                await invoke_callback(on_success)
            elif isinstance(outcome, Error):
                logger.warning("Command %s errored: %s", command_id, outcome.details)
                await invoke_callback(on_error, outcome.details)
            else:
                logger.info("Command rejected.")
                await invoke_callback(on_rejection, outcome.details)

    # ── Lifecycle ────────────────────────────────────────────────

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> BackendClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ── Internals ────────────────────────────────────────────────

    async def _fetch(
        self,
        query: TypedMessage[Query],
        on_data: ItemCallback,
        on_error: ErrorCallback | None,
    ) -> None:
        query_id = query.message.id.value
        with correlation_scope():
            try:
                handle = await self._request_handle(query)
            except Exception as e:  # noqa: BLE001
                await self._report_query_failure(query_id, e, on_error)
                return

            # Subscribers may get stored items while still registering.
            raised_by_on_data: list[BaseException] = []

            async def deliver(item: Any) -> None:
                try:
                    await invoke_callback(on_data, item)
                except Exception as e:
                    if registering:
                        raised_by_on_data.append(e)
                    raise

            registering = True
            try:
                await self._subscriptions.subscribe_to(handle, deliver)
            except Exception as e:  # noqa: BLE001
                if any(e is failure for failure in raised_by_on_data):
                    raise
                await self._report_query_failure(query_id, e, on_error)
                return
            finally:
                registering = False
                raised_by_on_data.clear()
            logger.debug("Query %s subscribed to %s", query_id, handle)

    async def _request_handle(self, query: TypedMessage[Query]) -> str:
        response = await self._transport.post(self._query_path, query)
        await self._ensure_success(response)
        handle = (await response.text()).strip()
        if not handle:
            raise TransportError(
                "Backend returned no subscription handle",
                status_code=response.status_code,
            )
        return handle

    async def _report_query_failure(
        self,
        query_id: str,
        exc: Exception,
        on_error: ErrorCallback | None,
    ) -> None:
        error = self._as_client_error(exc)
        if on_error is None:
            logger.debug("Dropping failure of query %s: %s", query_id, error)
        await invoke_callback(on_error or noop, error)

    async def _post_command(self, command: TypedMessage[Command]) -> Outcome:
        response = await self._transport.post(self._command_path, command)
        await self._ensure_success(response)
        data = await response.json()
        return self._serializer.ack_from_json(data).outcome()

    @staticmethod
    async def _ensure_success(response: TransportResponse) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        detail = (await response.text())[:_MAX_DETAIL_LENGTH]
        raise TransportError(
            f"Backend replied with HTTP {status}",
            status_code=status,
            detail=detail,
        )

    @staticmethod
    def _as_client_error(exc: Exception) -> ClientError:
        if isinstance(exc, ClientError):
            return exc
        error = TransportError(f"{type(exc).__name__}: {exc}")
        error.__cause__ = exc
        return error
