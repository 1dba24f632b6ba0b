from dataclasses import dataclass
from typing import Iterator, List, Optional, Union


@dataclass(frozen=True)
class ResultMessage:
    """A coded diagnostic. Negative codes are errors, positive codes are warnings."""
    text: str
    code: int

    @property
    def is_error(self) -> bool:
        return self.code < 0

    @property
    def is_warning(self) -> bool:
        return self.code > 0

    def __str__(self) -> str:
        return f"[{self.code}] {self.text}"


# Conductor
ERROR050 = ResultMessage("Size parameter cannot be null.", -50)
ERROR051 = ResultMessage("Conductive metal parameter cannot be null.", -51)
ERROR052 = ResultMessage("Insulation parameter cannot be null.", -52)
ERROR053 = ResultMessage("Length parameter cannot be <=0.", -53)
ERROR054 = ResultMessage("Ambient temperature parameter must be >= 5°F and <= 185°F.", -54)
ERROR055 = ResultMessage("Copper coating parameter cannot be null.", -55)
ERROR056 = ResultMessage("Role parameter cannot be null.", -56)

# Cable
ERROR058 = ResultMessage("Metal for grounding conductor cannot be null.", -58)
ERROR059 = ResultMessage("Cable type parameter cannot be null.", -59)
ERROR060 = ResultMessage("Outer diameter parameter cannot be less than 0.5 inches.", -60)
ERROR062 = ResultMessage("Phase conductor size cannot be null.", -62)
ERROR063 = ResultMessage("Neutral conductor size cannot be null.", -63)
ERROR064 = ResultMessage("Grounding conductor size cannot be null.", -64)

# Conduit
ERROR101 = ResultMessage("Minimum trade size parameter cannot be null.", -101)
ERROR102 = ResultMessage("Conduit type parameter cannot be null.", -102)
ERROR103 = ResultMessage("Cannot add a null conductor or cable to this conduit.", -103)
ERROR104 = ResultMessage(
    "The calculated trade size for this conduit is not recognized by NEC Table 4 (not available).", -104
)

# Bundle
ERROR150 = ResultMessage("Cannot add a null conductor or cable to this bundle.", -150)
ERROR151 = ResultMessage("Bundling length must be >=0.", -151)


class ResultMessages:
    """Ordered, code-unique collection of diagnostics attached to one entity."""

    def __init__(self):
        self._messages: List[ResultMessage] = []

    def add(self, message: ResultMessage) -> None:
        if not self.contains(message.code):
            self._messages.append(message)

    def remove(self, message: Union[ResultMessage, int]) -> None:
        code = message if isinstance(message, int) else message.code
        self._messages = [m for m in self._messages if m.code != code]

    def check(self, failed: bool, message: ResultMessage) -> bool:
        """Record ``message`` when ``failed``, clear it otherwise. Returns ``failed``."""
        if failed:
            self.add(message)
        else:
            self.remove(message)
        return failed

    def contains(self, code: int) -> bool:
        return any(m.code == code for m in self._messages)

    def get(self, code: int) -> Optional[ResultMessage]:
        for m in self._messages:
            if m.code == code:
                return m
        return None

    def has_errors(self) -> bool:
        return any(m.is_error for m in self._messages)

    def has_warnings(self) -> bool:
        return any(m.is_warning for m in self._messages)

    def errors(self) -> List[ResultMessage]:
        return [m for m in self._messages if m.is_error]

    def warnings(self) -> List[ResultMessage]:
        return [m for m in self._messages if m.is_warning]

    def clear(self) -> None:
        self._messages.clear()

    @property
    def messages(self) -> List[ResultMessage]:
        return list(self._messages)

    def __contains__(self, item) -> bool:
        code = item if isinstance(item, int) else item.code
        return self.contains(code)

    def __iter__(self) -> Iterator[ResultMessage]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ResultMessages({self._messages!r})"
