from abc import ABC, abstractmethod

from soundtherapy.schemas.biometrics import BiometricSnapshot


class SourceDisconnected(RuntimeError):
    """Raised when reading from a source that is not connected."""


class BiometricSource(ABC):
    """Abstract interface for wearable plugins.

    Each source (simulated, Garmin, etc.) implements this interface to provide
    a consistent way to connect and read biometric snapshots. Connection state
    is binary and `connect()` may be retried after a failure.
    """

    def __init__(self) -> None:
        self._connected = False

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Identifier for this source (e.g. 'simulated', 'garmin')."""
        ...

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        """Establish a connection.

        Returns True if the source is connected afterwards, False otherwise.
        """
        self._connected = await self._open()
        return self._connected

    async def disconnect(self) -> None:
        self._connected = False

    async def read(self) -> BiometricSnapshot:
        """Take a reading.

        Raises:
            SourceDisconnected: If `connect()` has not succeeded.
        """
        if not self._connected:
            raise SourceDisconnected(f"{self.source_type} source is not connected")
        return await self._read()

    @abstractmethod
    async def _open(self) -> bool: ...

    @abstractmethod
    async def _read(self) -> BiometricSnapshot: ...
