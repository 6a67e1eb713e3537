"""
Configuration module for admin-forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class AdminFormsConfig:
    """Configuration settings for admin-forms."""

    # Logging settings
    log_level: str = "INFO"
    log_file: str | None = None
    verbose_output: bool = False

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080

    # Demo console settings
    demo_port: int = 7860

    # Output settings
    indent_json_output: int = 2

    @classmethod
    def from_env(cls) -> "AdminFormsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            log_level=os.getenv("ADMIN_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
            log_file=os.getenv("ADMIN_FORMS_LOG_FILE") or _defaults.log_file,
            verbose_output=os.getenv("ADMIN_FORMS_VERBOSE_OUTPUT", str(_defaults.verbose_output).lower()).lower() == "true",
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            demo_port=int(os.getenv("ADMIN_FORMS_DEMO_PORT", str(_defaults.demo_port))),
            indent_json_output=int(os.getenv("ADMIN_FORMS_INDENT_JSON", str(_defaults.indent_json_output))),
        )


config = AdminFormsConfig.from_env()


def get_config() -> AdminFormsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> AdminFormsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
