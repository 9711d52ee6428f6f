"""ASGI middleware capping request body size."""

from starlette.types import ASGIApp, Receive, Scope, Send

from src.bfhl.schemas import create_error_response
from src.exceptions import PayloadTooLargeError


class MaxBodySizeMiddleware:
    """Reject requests that exceed the configured body size limit.

    A declared Content-Length over the cap is answered here directly. For
    streamed bodies the cap is enforced while reading: the error is raised
    from ``receive`` inside the endpoint, so the app's PayloadTooLargeError
    handler renders the 413.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        """Initialize the middleware with an app and size cap.

        Args:
            app: The downstream ASGI application.
            max_body_size: Maximum allowed request body size in bytes.
        """
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Enforce size limits before passing control to the app.

        Args:
            scope: ASGI connection scope.
            receive: ASGI receive callable.
            send: ASGI send callable.
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        for header, value in scope.get("headers", []):
            if header == b"content-length":
                try:
                    size = int(value)
                except ValueError:
                    size = self.max_body_size + 1
                if size > self.max_body_size:
                    exc = PayloadTooLargeError(size_bytes=size, max_bytes=self.max_body_size)
                    response = create_error_response(413, exc.message)
                    await response(scope, receive, send)
                    return

        received = 0

        async def receive_wrapper():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                body = message.get("body", b"")
                received += len(body)
                if received > self.max_body_size:
                    raise PayloadTooLargeError(size_bytes=received, max_bytes=self.max_body_size)
            return message

        try:
            await self.app(scope, receive_wrapper, send)
        except PayloadTooLargeError as exc:
            # Body read outside the app's exception handlers
            response = create_error_response(413, exc.message)
            await response(scope, receive, send)
