import logging
from functools import lru_cache

from pydantic import Field, PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This class defines all configuration values used by the application,
    including database connection details for the student lookups and the
    defaults applied when a resume is rendered.

    Attributes:
        database_url (PostgresDsn): Database connection URL for PostgreSQL.
            This is used to look up students and their resume records.
        default_template (str): Template used when a request does not name one.
        default_layout (str): Layout used when a request does not name one.
        share_base_url (str): Base URL prepended to share ids when building
            public resume links.
        pdf_unicode_font_path (str | None): Optional TrueType font used for
            names and text the standard PDF fonts cannot encode.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Database settings
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="student_portal", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")

    @computed_field
    @property
    def database_url(self) -> PostgresDsn:
        """
        Assembled database URL from components.

        Args:
            None: This property does not take any arguments.

        Returns:
            PostgresDsn: The fully assembled PostgreSQL connection URL.

        Notes:
            1. Constructs the database URL using the components: scheme, username, password, host, port, and path.
            2. The scheme is set to "postgresql".
            3. The resulting URL is returned as a PostgresDsn object.

        """
        return PostgresDsn.build(
            scheme="postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            path=self.db_name,
        )

    # Rendering settings
    default_template: str = Field(
        default="modern",
        validation_alias="DEFAULT_TEMPLATE",
    )
    default_layout: str = Field(
        default="single-column",
        validation_alias="DEFAULT_LAYOUT",
    )

    # Sharing settings
    share_base_url: str = Field(
        default="http://localhost:3000/api/student/resume/public",
        validation_alias="SHARE_BASE_URL",
    )
    pdf_unicode_font_path: str | None = Field(
        default=None,
        validation_alias="PDF_UNICODE_FONT_PATH",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    This function returns a singleton instance of the Settings class,
    which contains all application configuration values.

    Args:
        None: This function does not take any arguments.

    Returns:
        Settings: The global settings instance, containing all configuration values.

    Raises:
        ValidationError: If environment variables are present but invalid.

    Notes:
        1. Reads configuration from environment variables using the .env file.
        2. If environment variables are not set, default values are used.
        3. The function returns a cached instance to avoid repeated parsing of the .env file.
        4. This function performs disk access to read the .env file at startup.

    """
    return Settings()
