from datetime import date
from typing import Dict, List

from pydantic import BaseModel

from src.service.registration.app.dto.registration_views import OrganizerProfile
from src.service.registration.driving_adapter.http_controller.schema.registration_schema import (
    EventSummaryResponse,
)


class TeamMemberResponse(BaseModel):
    id: str
    name: str
    role: str
    bio: str


class OrganizerStatsResponse(BaseModel):
    total_events: int
    total_attendees: int
    average_rating: float
    upcoming_events: int


class OrganizerProfileResponse(BaseModel):
    organizer_id: str
    name: str
    description: str
    member_count: int
    event_count: int
    founded_date: date
    website: str
    email: str
    phone: str
    address: str
    tags: List[str]
    social_media: Dict[str, str]
    stats: OrganizerStatsResponse
    team: List[TeamMemberResponse]
    events: List[EventSummaryResponse]

    @classmethod
    def from_view(cls, view: OrganizerProfile) -> 'OrganizerProfileResponse':
        organizer = view.organizer
        return cls(
            organizer_id=organizer.organizer_id,
            name=organizer.name,
            description=organizer.description,
            member_count=organizer.member_count,
            event_count=len(view.events),
            founded_date=organizer.founded_date,
            website=organizer.website,
            email=organizer.email,
            phone=organizer.phone,
            address=organizer.address,
            tags=list(organizer.tags),
            social_media=dict(organizer.social_media),
            stats=OrganizerStatsResponse(
                total_events=organizer.stats.total_events,
                total_attendees=organizer.stats.total_attendees,
                average_rating=organizer.stats.average_rating,
                upcoming_events=organizer.stats.upcoming_events,
            ),
            team=[
                TeamMemberResponse(id=m.id, name=m.name, role=m.role, bio=m.bio)
                for m in organizer.team
            ],
            events=[EventSummaryResponse.from_domain(event) for event in view.events],
        )
