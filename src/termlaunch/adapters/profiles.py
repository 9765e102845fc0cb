"""In-memory profile list."""

from dataclasses import dataclass, field

from ..errors import ProfileNotFoundError
from .base import ProfileLookup

# UUID of the profile every fresh installation starts with
DEFAULT_PROFILE_UUID = "b1dcc9dd-5262-4d8d-a863-c897e6d979b9"


@dataclass
class Profile:
    """Profile entry"""

    uuid: str
    name: str


@dataclass
class ProfileList(ProfileLookup):
    """Profile list backed by a plain list.

    Attributes:
        profiles: known profiles, in display order
        default_uuid: UUID returned when no name is given; falls back to the
            first profile when unset
    """

    profiles: list[Profile] = field(default_factory=list)
    default_uuid: str | None = None

    @classmethod
    def with_default(cls) -> "ProfileList":
        """A list holding only the stock default profile."""
        return cls([Profile(uuid=DEFAULT_PROFILE_UUID, name="Default")], DEFAULT_PROFILE_UUID)

    def _default(self) -> str:
        if self.default_uuid is not None:
            return self.dup_uuid(self.default_uuid)
        if not self.profiles:
            raise ProfileNotFoundError("No profiles available")
        return self.profiles[0].uuid

    def dup_uuid_or_name(self, uuid_or_name: str | None) -> str:
        if uuid_or_name is None:
            return self._default()

        for profile in self.profiles:
            if profile.uuid == uuid_or_name:
                return profile.uuid

        matches = [p for p in self.profiles if p.name == uuid_or_name]
        if len(matches) == 1:
            return matches[0].uuid
        if len(matches) > 1:
            raise ProfileNotFoundError(f"Profile name “{uuid_or_name}” is ambiguous")
        raise ProfileNotFoundError(f"No profile with UUID or name “{uuid_or_name}” exists")

    def dup_uuid(self, uuid: str) -> str:
        for profile in self.profiles:
            if profile.uuid == uuid:
                return profile.uuid
        raise ProfileNotFoundError(f"No profile with UUID “{uuid}” exists")
