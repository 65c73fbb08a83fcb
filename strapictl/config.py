"""Configuration management for the strapictl application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # Plugin naming
    PLUGIN_PREFIX: str = os.getenv("STRAPICTL_PLUGIN_PREFIX", "strapi-plugin-")
    PLUGIN_TAG: str = os.getenv("STRAPICTL_PLUGIN_TAG", "alpha")

    # External tooling
    NPM_BIN: str = os.getenv("STRAPICTL_NPM_BIN", "npm")
    REGISTRY_URL: str = os.getenv("STRAPICTL_REGISTRY_URL", "https://www.npmjs.com/package")

    # Admin panel serving the plugin bundles
    ADMIN_URL: str = os.getenv("STRAPICTL_ADMIN_URL", "http://localhost:1337/admin")

    # Source tree for --dev installs (empty = derive from the checkout)
    PACKAGES_DIR: str = os.getenv("STRAPICTL_PACKAGES_DIR", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        required = {
            "STRAPICTL_PLUGIN_PREFIX": cls.PLUGIN_PREFIX,
            "STRAPICTL_PLUGIN_TAG": cls.PLUGIN_TAG,
            "STRAPICTL_NPM_BIN": cls.NPM_BIN,
        }
        missing = [k for k, v in required.items() if not v]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")
