from dataclasses import dataclass


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
