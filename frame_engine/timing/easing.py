"""
Easing curves.

Every curve is a total function over the reals: callers clamp to [0, 1]
before easing when they want the conventional range. Curves may leave
[0, 1] on purpose (elastic overshoot).
"""

import math
from enum import Enum
from typing import Callable, Dict

from ..errors import ConfigurationError

# Any t -> t' callable can be injected where an easing is expected.
EasingStrategy = Callable[[float], float]


class EasingType(Enum):
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    ELASTIC = "elastic"
    BOUNCE = "bounce"


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - ((2 * (1 - t)) ** 2) / 2


def elastic(t: float) -> float:
    if t == 0 or t == 1:
        return t
    p = 0.3
    s = p / 4
    return -(2 ** (10 * (t - 1))) * math.sin((t - 1 - s) * (2 * math.pi) / p)


def bounce(t: float) -> float:
    if t < 0.363636:
        return 7.5625 * t * t
    elif t < 0.727273:
        t = t - 0.545454
        return 7.5625 * t * t + 0.75
    elif t < 0.909091:
        t = t - 0.818182
        return 7.5625 * t * t + 0.9375
    else:
        t = t - 0.954545
        return 7.5625 * t * t + 0.984375


def power_in(power: int) -> EasingStrategy:
    """GSAP-style powerN.in: t ** (N + 1)."""
    exponent = power + 1

    def curve(t: float) -> float:
        return t ** exponent
    return curve


def power_out(power: int) -> EasingStrategy:
    """GSAP-style powerN.out: fast start, slow settle."""
    exponent = power + 1

    def curve(t: float) -> float:
        return 1 - (1 - t) ** exponent
    return curve


def power_in_out(power: int) -> EasingStrategy:
    exponent = power + 1

    def curve(t: float) -> float:
        if t < 0.5:
            return ((2 * t) ** exponent) / 2
        return 1 - ((2 * (1 - t)) ** exponent) / 2
    return curve


# The decelerating curve every wheel, bar and panel in the scenes uses.
power2_out = power_out(2)


EASING_FUNCTIONS: Dict[str, EasingStrategy] = {
    EasingType.LINEAR.value: linear,
    EasingType.EASE_IN.value: ease_in,
    EasingType.EASE_OUT.value: ease_out,
    EasingType.EASE_IN_OUT.value: ease_in_out,
    EasingType.ELASTIC.value: elastic,
    EasingType.BOUNCE.value: bounce,
    "none": linear,
}

for _power in range(1, 5):
    EASING_FUNCTIONS[f"power{_power}.in"] = power_in(_power)
    EASING_FUNCTIONS[f"power{_power}.out"] = power_out(_power)
    EASING_FUNCTIONS[f"power{_power}.inOut"] = power_in_out(_power)
EASING_FUNCTIONS["power2.out"] = power2_out


def get_easing_function(name) -> EasingStrategy:
    """Look up a curve by EasingType or name ("ease_out", "power2.out", ...)."""
    key = name.value if isinstance(name, EasingType) else name
    try:
        return EASING_FUNCTIONS[key]
    except KeyError:
        raise ConfigurationError(f"Unknown easing: {name!r}") from None


def ease(t: float, easing=EasingType.LINEAR) -> float:
    """Apply easing function to a normalized time value."""
    if callable(easing):
        return easing(t)
    return get_easing_function(easing)(t)
