"""Repository identity model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Meta(BaseModel):
    """Owner and name of a GitHub repository.

    Two identities are equal when both owner and name are equal as strings,
    case included.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    def __repr__(self) -> str:
        return f"<Meta(full_name='{self.full_name}')>"

    def __str__(self) -> str:
        return self.full_name

    @property
    def full_name(self) -> str:
        """Repository name in ``owner/name`` form."""
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_full_name(cls, full_name: str) -> "Meta":
        """Create identity from an ``owner/name`` string."""
        owner, sep, name = full_name.partition("/")
        if not sep or not owner or not name or "/" in name:
            msg = f"invalid repository name {full_name!r}, expected owner/name"
            raise ValueError(msg)

        return cls(owner=owner, name=name)

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Meta":
        """Create identity from a GitHub repository object."""
        return cls(owner=github_data["owner"]["login"], name=github_data["name"])
