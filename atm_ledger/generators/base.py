"""Base generator class for randomized values."""

from __future__ import annotations

from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for generators backed by Faker.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Seeds only this generator's
        Faker instance, not the global ``random`` module.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
