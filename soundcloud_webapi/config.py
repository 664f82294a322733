import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    SOUNDCLOUD_CLIENT_ID = os.getenv('SOUNDCLOUD_CLIENT_ID')
    SOUNDCLOUD_CLIENT_SECRET = os.getenv('SOUNDCLOUD_CLIENT_SECRET')
    SOUNDCLOUD_REDIRECT_URI = os.getenv('SOUNDCLOUD_REDIRECT_URI')

    # Transport settings
    SOUNDCLOUD_API_BASE_URL = os.getenv(
        'SOUNDCLOUD_API_BASE_URL', 'https://api.soundcloud.com'
    )
    SOUNDCLOUD_TIMEOUT = float(os.getenv('SOUNDCLOUD_TIMEOUT', 30))
    SOUNDCLOUD_MAX_RETRIES = int(os.getenv('SOUNDCLOUD_MAX_RETRIES', 0))

    DEBUG = False
    TESTING = False


class ProductionConfig(Config):
    """Production configuration."""


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SOUNDCLOUD_CLIENT_ID = 'test_client_id'
    SOUNDCLOUD_MAX_RETRIES = 0


def as_dict(config_class) -> dict:
    """Flatten a config class into a plain dict of its upper-case settings."""
    return {
        key: getattr(config_class, key)
        for key in dir(config_class)
        if key.isupper()
    }


# Dictionary for easy config selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
