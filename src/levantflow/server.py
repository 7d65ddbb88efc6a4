"""
Threaded HTTP server with graceful shutdown.

On shutdown the listener stops accepting connections, in-flight requests
are allowed to finish, then the socket is closed.
"""
import signal
import logging
import threading

from flask import Flask
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


class StatusServer:
    def __init__(self, app: Flask, host: str, port: int):
        self.app = app
        self._server = make_server(host, port, app, threaded=True)
        # Request threads are joined on close so in-flight requests complete.
        self._server.block_on_close = True
        self._shutdown_requested = threading.Event()

    @property
    def port(self) -> int:
        return self._server.server_port

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested.is_set()

    def serve_forever(self) -> None:
        logger.info(f"Server is running on port {self.port}")
        try:
            self._server.serve_forever()
        finally:
            self._server.server_close()
            logger.info("HTTP server closed")

    def shutdown(self) -> None:
        """
        Ask the serve loop to stop.

        Safe to call from a signal handler running on the serving thread:
        the blocking shutdown call is made from a helper thread.
        """
        if self._shutdown_requested.is_set():
            return
        self._shutdown_requested.set()
        threading.Thread(target=self._server.shutdown, name="server-shutdown", daemon=True).start()

    def handle_exit_signal(self, signum, frame) -> None:
        logger.info(f"{signal.Signals(signum).name} signal received: closing HTTP server")
        self.shutdown()

    def install_signal_handlers(self) -> None:
        signal.signal(signal.SIGTERM, self.handle_exit_signal)
        signal.signal(signal.SIGINT, self.handle_exit_signal)
