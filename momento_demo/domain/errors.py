from __future__ import annotations


class MomentoDemoError(Exception):
    pass


class ClientNotInitializedError(MomentoDemoError):
    def __init__(self, message: str = "Client not initialized") -> None:
        super().__init__(message)
