MYR_PER_GYR = 1000.0


def gyr_to_myr(gyr: float) -> float:
    """Convert billions of years to millions of years."""
    return gyr * MYR_PER_GYR


def myr_to_gyr(myr: float) -> float:
    """Convert millions of years to billions of years."""
    return myr / MYR_PER_GYR


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return max(lower, min(value, upper))
