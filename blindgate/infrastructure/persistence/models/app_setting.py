"""Key-value settings model (policy source).

Values are JSON text so booleans and integers round-trip with their type.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseMutableModel


class AppSettingModel(BaseMutableModel):
    """Stored setting.

    Known keys:
        - site.registrationEnabled (bool)
        - security.minPasswordLength (int)
        - security.sessionExpireDays (int)
        - content.maxPostsPerDay (int)
        - content.maxCommentsPerDay (int)
    """

    __tablename__ = "app_settings"

    key: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<AppSettingModel(key={self.key})>"
