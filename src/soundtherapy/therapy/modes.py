"""Static catalog of therapy modes shown to the UI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TherapyMode:
    mode: str
    label: str
    description: str
    requires_unlock: bool = False


# Order is the display order.
MODE_CATALOG: tuple[TherapyMode, ...] = (
    TherapyMode(
        mode="relaxation",
        label="Relaxation",
        description="Theta-band beats over brown noise and ocean waves to unwind.",
    ),
    TherapyMode(
        mode="focus",
        label="Focus",
        description="Beta-band beats over white noise and a running stream for concentration.",
    ),
    TherapyMode(
        mode="sleep",
        label="Sleep",
        description="Delta-band beats over pink noise and rain to ease into sleep.",
    ),
    TherapyMode(
        mode="premium",
        label="Premium",
        description="Personalised soundscapes for unlocked accounts.",
        requires_unlock=True,
    ),
)

_BY_KEY = {m.mode: m for m in MODE_CATALOG}


def get_mode(mode: str) -> TherapyMode:
    """Look up a mode by key.

    Raises:
        ValueError: If the mode is not in the catalog.
    """
    try:
        return _BY_KEY[mode]
    except KeyError:
        raise ValueError(f"Unknown therapy mode '{mode}'") from None


def is_unlocked(mode: TherapyMode, premium_unlocked: bool) -> bool:
    return not mode.requires_unlock or premium_unlocked
