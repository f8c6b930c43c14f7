"""Default color generator for new pills.

Colors are opaque tokens to the rest of the core. The default produces
pastel CSS hsl() strings; callers can pass any zero-argument callable instead.
"""

import random
from collections.abc import Callable

ColorGenerator = Callable[[], str]


def pastel_color(rng: random.Random | None = None) -> str:
    """Pick a random pastel color.

    Args:
        rng: Random source (module-level generator if None)

    Returns:
        Color token like "hsl(212 67% 58%)"
    """
    randrange = rng.randrange if rng is not None else random.randrange
    hue = randrange(360)
    saturation = 60 + randrange(20)
    lightness = 55 + randrange(8)
    return f"hsl({hue} {saturation}% {lightness}%)"


def pastel_color_generator(seed: int | None = None) -> ColorGenerator:
    """Create a pastel color generator with its own random source.

    Args:
        seed: Seed for reproducible colors

    Returns:
        Zero-argument callable returning a new color token per call
    """
    rng = random.Random(seed)
    return lambda: pastel_color(rng)
