"""Mock LinkedIn records returned by the demo tools.

Nothing here talks to LinkedIn. The records mirror the shape of the real REST
responses (localized strings, URNs, paging blocks) so that clients built
against the demo see realistic JSON.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone

INDUSTRIES = ("Technology", "Finance", "Healthcare", "Education", "Manufacturing")
LOCATIONS = (
    "San Francisco, CA",
    "New York, NY",
    "Seattle, WA",
    "Austin, TX",
    "Boston, MA",
)
SEARCH_RESULT_CAP = 5
DEMO_AUTHOR_ID = "demo-user-id"


def localized(value: str, locale: str = "en_US") -> dict[str, dict[str, str]]:
    """Wrap a value in LinkedIn's localized-string shape."""
    return {"localized": {locale: value}}


@dataclass
class Profile:
    """Member profile."""

    id: str
    first_name: str
    last_name: str
    headline: str
    industry: str
    location: str
    public_profile_url: str
    profile_picture: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "firstName": localized(self.first_name),
            "lastName": localized(self.last_name),
            "headline": localized(self.headline),
            "industry": localized(self.industry),
            "location": localized(self.location),
            "profilePicture": self.profile_picture,
            "publicProfileUrl": self.public_profile_url,
        }


@dataclass
class Post:
    """Share created on behalf of the demo member."""

    text: object
    id: str
    visibility: object
    created_at: datetime
    author: str = DEMO_AUTHOR_ID
    status: str = "PUBLISHED"

    @classmethod
    def create(
        cls, text: object, visibility: object, now: datetime | None = None
    ) -> Post:
        """Build a post whose id is derived from the creation time."""
        created_at = now or datetime.now(timezone.utc)
        millis = int(created_at.timestamp() * 1000)
        return cls(
            text=text,
            id=f"demo-post-{millis}",
            visibility=visibility,
            created_at=created_at,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "id": self.id,
            "status": self.status,
            "visibility": self.visibility,
            "createdAt": iso_timestamp(self.created_at),
            "author": self.author,
        }


@dataclass
class Organization:
    """Organization returned by a search."""

    id: str
    name: str
    industry: str
    location: str
    employee_count_start: int
    employee_count_end: int

    @classmethod
    def from_query(cls, query: str, index: int) -> Organization:
        """Synthesize the ``index``-th search hit for ``query`` (1-based)."""
        return cls(
            id=f"org-{slugify(query)}-{index}",
            name=f"{query} Organization {index}",
            industry=INDUSTRIES[index % len(INDUSTRIES)],
            location=LOCATIONS[index % len(LOCATIONS)],
            employee_count_start=10**index,
            employee_count_end=10 ** (index + 1),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "localizedName": self.name,
            "industry": self.industry,
            "employeeCountRange": {
                "start": self.employee_count_start,
                "end": self.employee_count_end,
            },
            "location": self.location,
        }


@dataclass
class OrganizationMembership:
    """Role the demo member holds in an organization."""

    organization: str
    role: str
    state: str
    organization_name: str

    def to_dict(self) -> dict[str, object]:
        return {
            "organization": self.organization,
            "role": self.role,
            "state": self.state,
            "organizationName": self.organization_name,
        }


DEMO_PROFILE = Profile(
    id="sample-user-id",
    first_name="Demo",
    last_name="User",
    headline="Professional using MCP Server",
    industry="Technology",
    location="San Francisco, CA",
    public_profile_url="https://linkedin.com/in/demo-user",
)

DEMO_MEMBERSHIPS = (
    OrganizationMembership(
        organization="urn:li:organization:demo123",
        role="ADMINISTRATOR",
        state="APPROVED",
        organization_name="Demo Tech Corp",
    ),
    OrganizationMembership(
        organization="urn:li:organization:demo456",
        role="MEMBER",
        state="APPROVED",
        organization_name="Sample Innovations Inc",
    ),
)


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse whitespace runs into dashes."""
    return re.sub(r"\s+", "-", value.lower())


def iso_timestamp(moment: datetime) -> str:
    """Format a timestamp as UTC ISO-8601 with milliseconds and a ``Z``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def search_organizations(query: str, limit: float) -> list[Organization]:
    """Return at most :data:`SEARCH_RESULT_CAP` synthetic hits for ``query``."""
    count = math.floor(min(limit, SEARCH_RESULT_CAP))
    return [Organization.from_query(query, index) for index in range(1, count + 1)]


def memberships_for_role(role: object) -> list[OrganizationMembership]:
    """Return the demo memberships, keeping only ``role`` when one is given."""
    if not role:
        return list(DEMO_MEMBERSHIPS)
    return [membership for membership in DEMO_MEMBERSHIPS if membership.role == role]
