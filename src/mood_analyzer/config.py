from dataclasses import dataclass
from typing import Optional


@dataclass
class MoodAnalyzerConfig:
    # Timing (delays are expressed in time units)
    time_unit_seconds: float = 1.0
    calm_down_delay_units: float = 1
    analysis_delay_units: float = 3
    disclosure_delay_units: float = 2

    # Mood deltas
    message_positive_delta: int = 15
    message_negative_delta: int = 18
    quick_reply_positive_delta: int = 12
    quick_reply_negative_delta: int = 15
    joke_delta: int = 18

    # Randomness
    random_seed: Optional[int] = None

    # Web
    max_message_length: int = 500
    rate_limit_enabled: bool = True
    upload_dir: Optional[str] = None
    secret_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    @property
    def calm_down_delay_seconds(self) -> float:
        return self.calm_down_delay_units * self.time_unit_seconds

    @property
    def analysis_delay_seconds(self) -> float:
        return self.analysis_delay_units * self.time_unit_seconds

    @property
    def disclosure_delay_seconds(self) -> float:
        return self.disclosure_delay_units * self.time_unit_seconds
