"""
Configuration loader with validation.

Builds MoodAnalyzerConfig from MOOD_* environment variables.
"""
from dotenv import load_dotenv
from .config import MoodAnalyzerConfig
from .config_validator import get_optional_env, get_int_env, get_float_env, get_bool_env


def load_config_from_env(dotenv_path: str = None) -> MoodAnalyzerConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = create_app(config)
    
    :param dotenv_path: Optional explicit .env file (defaults to searching upwards)
    :return: Validated MoodAnalyzerConfig instance
    :raises: ConfigurationError if a value is malformed
    """
    # Load .env file if it exists (for local development)
    load_dotenv(dotenv_path)
    
    defaults = MoodAnalyzerConfig()
    seed = get_optional_env("MOOD_RANDOM_SEED")
    
    return MoodAnalyzerConfig(
        time_unit_seconds=get_float_env("MOOD_TIME_UNIT_SECONDS", defaults.time_unit_seconds, minimum=0.0),
        calm_down_delay_units=get_float_env("MOOD_CALM_DOWN_DELAY_UNITS", defaults.calm_down_delay_units, minimum=0.0),
        analysis_delay_units=get_float_env("MOOD_ANALYSIS_DELAY_UNITS", defaults.analysis_delay_units, minimum=0.0),
        disclosure_delay_units=get_float_env("MOOD_DISCLOSURE_DELAY_UNITS", defaults.disclosure_delay_units, minimum=0.0),
        random_seed=get_int_env("MOOD_RANDOM_SEED", 0) if seed else None,
        max_message_length=get_int_env("MOOD_MAX_MESSAGE_LENGTH", defaults.max_message_length, minimum=1),
        rate_limit_enabled=get_bool_env("MOOD_RATE_LIMIT_ENABLED", defaults.rate_limit_enabled),
        upload_dir=get_optional_env("MOOD_UPLOAD_DIR"),
        secret_key=get_optional_env("FLASK_SECRET_KEY"),
        log_level=get_optional_env("MOOD_LOG_LEVEL", defaults.log_level).upper(),
    )
