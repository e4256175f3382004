from soundtherapy.models.session import TherapySession

__all__ = [
    "TherapySession",
]
