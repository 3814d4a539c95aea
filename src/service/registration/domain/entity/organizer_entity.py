from datetime import date
from typing import Dict, Tuple

import attrs


@attrs.frozen
class TeamMember:
    id: str
    name: str
    role: str
    bio: str = ''


@attrs.frozen
class OrganizerStats:
    total_events: int
    total_attendees: int
    average_rating: float
    upcoming_events: int


@attrs.frozen
class Organizer:
    organizer_id: str
    name: str
    description: str
    member_count: int
    founded_date: date
    website: str
    email: str
    phone: str
    address: str
    stats: OrganizerStats
    tags: Tuple[str, ...] = attrs.field(default=(), converter=tuple)
    social_media: Dict[str, str] = attrs.field(factory=dict)
    team: Tuple[TeamMember, ...] = attrs.field(default=(), converter=tuple)
