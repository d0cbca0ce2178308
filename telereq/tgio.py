import asyncio
import base64
import hashlib
import logging

import httpx
from pydantic import BaseModel

from .config import Settings
from .wire import WireModel, dumps

logger = logging.getLogger(__name__)

Timeout = float
APIMethod = str


def tokenhash(token: str) -> str:
    """
    Generate a URL-safe base64-encoded SHA-256 hash of a token string.

    Args:
        token: The token string to be hashed.

    Returns:
        A URL-safe base64-encoded representation of the SHA-256 hash digest.
    """
    digest = hashlib.sha256(token.encode("utf-8")).digest()
    urlsafe = base64.urlsafe_b64encode(digest).decode("utf-8")
    return urlsafe


class Response(BaseModel):
    """
    Raw outcome of a Bot API call.

    Attributes:
        method: The name of the Telegram Bot API method called.
        status_code: HTTP status code of the reply.
        contents: The reply body, as received.
    """

    method: APIMethod
    status_code: int
    contents: str


class Output:
    """
    Sends outgoing requests to the Bot API.

    Requests are either sent directly with `call` or queued with `request`
    and drained by worker tasks started from `handle`.

    Attributes:
        client: httpx async client bound to the API base URL.
        timeout: Timeout for API operations.
        upd_queue: Asyncio queue holding outgoing requests to send.
        response_queue: Optional queue to send raw responses to.
        n_workers: Number of concurrent worker tasks sending requests.
    """

    def __init__(
        self,
        token: str,
        response_queue: asyncio.Queue[Response] | None = None,
        timeout: Timeout = 10,
        queue_size: int = 512,
        workers: int = 1,
        api_url: str = "https://api.telegram.org",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the Output handler.

        Args:
            token: API token for the Telegram bot.
            response_queue: Optional asyncio.Queue to receive API call responses.
            timeout: Timeout for API requests (seconds).
            queue_size: Max size of internal outgoing request queue.
            workers: Number of concurrent worker tasks.
            api_url: Bot API base URL.
            client: Preconfigured httpx client, mostly for tests.
        """
        self.token = token
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(
            base_url=api_url.rstrip("/"), timeout=timeout
        )
        self.response_queue = response_queue
        self.upd_queue: asyncio.Queue[WireModel] = asyncio.Queue(maxsize=queue_size)
        self.n_workers = workers
        logger.info(f"Bot output handler created with token_hash = {tokenhash(token)}")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        response_queue: asyncio.Queue[Response] | None = None,
    ) -> "Output":
        return cls(
            token=settings.telegram_api_token,
            response_queue=response_queue,
            timeout=settings.timeout,
            queue_size=settings.output_queue_size,
            workers=settings.output_workers,
            api_url=str(settings.api_url),
        )

    async def call(self, request: WireModel) -> Response:
        """
        Serialize a request and post it to its Bot API method.

        Args:
            request: A top-level request model (one declaring `api_method`).

        Returns:
            The raw response; its status code is not interpreted.

        Raises:
            TypeError: If the model is not a top-level API request.
            httpx.HTTPError: On transport failures.
        """
        method = request.api_method
        if method is None:
            raise TypeError(f"{type(request).__name__} is not a Bot API request")
        body = dumps(request)
        reply = await self.client.post(
            f"/bot{self.token}/{method}",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        logger.debug(f"Teleapi/{method} replied with HTTP {reply.status_code}")
        return Response(method=method, status_code=reply.status_code, contents=reply.text)

    async def worker(self, name: str = "output") -> None:
        """
        Async worker coroutine that continually sends requests from the queue.

        Catches and logs HTTP and unexpected exceptions. If a response_queue is provided,
        API responses are sent there asynchronously.

        Args:
            name: Optional worker identifier for logging.
        """
        try:
            while True:
                request = await self.upd_queue.get()
                method = request.api_method
                logger.debug(f"Output worker '{name}' got a {method} request from a queue")
                try:
                    response = await self.call(request)
                except httpx.HTTPError as e:
                    logger.error(f"Teleapi/{method} HTTP error: {e}")
                    continue
                except Exception as e:
                    logger.error(f"Teleapi/{method} unexpected error: {e}")
                    continue
                finally:
                    self.upd_queue.task_done()
                if self.response_queue is not None:
                    try:
                        await asyncio.wait_for(
                            self.response_queue.put(response),
                            timeout=1,
                        )
                    except asyncio.TimeoutError:
                        logger.error(
                            f"Response queue is full, discarding {method}'s response"
                        )
        finally:
            logger.info(f"Cancelled an Output worker '{name}'")

    async def request(self, request: WireModel) -> None:
        await self.upd_queue.put(request)

    async def handle(
        self,
        notify_event: asyncio.Event | None = None,
    ) -> None:
        """
        Start worker tasks and send outgoing requests from `upd_queue`.

        Args:
            notify_event: Optional asyncio.Event to signal when workers have started.

        Behavior:
            - Requires external code to fill `upd_queue`.
            - Runs indefinitely until cancelled.
        """
        async with asyncio.TaskGroup() as task_group:
            for i in range(self.n_workers):
                task_group.create_task(self.worker(f"output {i}"))
            if notify_event is not None:
                notify_event.set()

    async def aclose(self) -> None:
        await self.client.aclose()
