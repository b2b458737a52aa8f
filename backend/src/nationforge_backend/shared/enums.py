"""Shared enumerations used across the backend."""

from enum import StrEnum


class GovernmentType(StrEnum):
    """Forms of government a nation can be founded with."""

    DEMOCRACY = "Democracy"
    MONARCHY = "Monarchy"
    REPUBLIC = "Republic"
    OLIGARCHY = "Oligarchy"
    THEOCRACY = "Theocracy"
    SOCIALIST = "Socialist"
    COMMUNIST = "Communist"
    DICTATORSHIP = "Dictatorship"


class NationalValue(StrEnum):
    """Value tags describing the principles of a nation."""

    FREEDOM = "Freedom"
    EQUALITY = "Equality"
    JUSTICE = "Justice"
    PROSPERITY = "Prosperity"
    INNOVATION = "Innovation"
    TRADITION = "Tradition"
    HARMONY = "Harmony"
    POWER = "Power"
    KNOWLEDGE = "Knowledge"
    HONOR = "Honor"


class FlagPattern(StrEnum):
    """Pattern identifiers understood by the flag renderer."""

    SOLID = "solid"
    STRIPE = "stripe"
    VERTICAL_STRIPE = "vertical-stripe"
    CROSS = "cross"
    DIAGONAL = "diagonal"
    CIRCLE = "circle"
    STAR = "star"
    TRIANGLE = "triangle"
