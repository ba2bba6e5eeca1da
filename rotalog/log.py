"""Fixed-format trace lines for package movements."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _pad(value: int, width: int) -> str:
    return str(value).rjust(width, "0")


class EventLog:
    """Writes one line per package movement to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, time: float, package_id: int, text: str) -> None:
        print(f"{_pad(int(time), 7)} pacote {_pad(package_id, 3)}{text}", file=self.stream)

    def stored(self, time: float, package_id: int, warehouse_id: int, section_id: int) -> None:
        self._write(
            time,
            package_id,
            f" armazenado em {_pad(warehouse_id, 3)} na secao {_pad(section_id, 3)}",
        )

    def removed(self, time: float, package_id: int, warehouse_id: int, section_id: int) -> None:
        self._write(
            time,
            package_id,
            f" removido de {_pad(warehouse_id, 3)} na secao {_pad(section_id, 3)}",
        )

    def restored(self, time: float, package_id: int, warehouse_id: int, section_id: int) -> None:
        self._write(
            time,
            package_id,
            f" rearmazenado em {_pad(warehouse_id, 3)} na secao {_pad(section_id, 3)}",
        )

    def in_transit(self, time: float, package_id: int, origin: int, destination: int) -> None:
        self._write(
            time,
            package_id,
            f" em transito de {_pad(origin, 3)} para {_pad(destination, 3)}",
        )

    def delivered(self, time: float, package_id: int, warehouse_id: int) -> None:
        self._write(time, package_id, f" entregue em {_pad(warehouse_id, 3)}")