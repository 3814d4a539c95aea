"""Static mock tables backing the in-memory repositories."""

from datetime import date, datetime, time, timezone

from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.entity.organizer_entity import (
    Organizer,
    OrganizerStats,
    TeamMember,
)
from src.service.registration.domain.entity.ticket_entity import TicketRecord
from src.service.registration.domain.enum.ticket_status import (
    CheckInStatus,
    PaymentStatus,
    TicketStatus,
)
from src.service.registration.domain.value_object.registrant import Registrant


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


EVENTS: tuple[EventRecord, ...] = (
    EventRecord(
        event_id='tech-conference-2025',
        title='Kigali Tech Conference 2025',
        event_date=date(2025, 3, 15),
        start_time=time(9, 0),
        end_time=time(17, 0),
        venue='Kigali Convention Centre',
        address='KG 2 Roundabout, Kigali',
        available_seats=500,
        organizer_id='binary-hub',
        refund_policy='Full refund up to 7 days before the event',
        dress_code='Business casual',
        age_restriction='16+',
    ),
    EventRecord(
        event_id='cultural-festival-2025',
        title='Rwanda Cultural Festival',
        event_date=date(2025, 4, 20),
        start_time=time(10, 0),
        end_time=time(22, 0),
        venue='Amahoro Stadium',
        address='KG 17 Ave, Remera, Kigali',
        available_seats=2000,
        organizer_id='university-of-rwanda',
        refund_policy='No refunds',
        dress_code='Traditional attire encouraged',
        age_restriction='All ages',
    ),
    EventRecord(
        event_id='research-symposium-2025',
        title='Annual Research Symposium',
        event_date=date(2025, 5, 8),
        start_time=time(8, 30),
        end_time=time(16, 30),
        venue='University of Rwanda, Main Hall',
        address='KK 737 St, Gikondo, Kigali',
        available_seats=300,
        organizer_id='university-of-rwanda',
        refund_policy='Free event, no refunds applicable',
        dress_code='Smart casual',
        age_restriction='18+',
    ),
    EventRecord(
        event_id='career-fair-2025',
        title='Kigali Career Fair',
        event_date=date(2025, 6, 12),
        start_time=time(9, 0),
        end_time=time(15, 0),
        venue='Kigali Exhibition Grounds',
        address='KG 9 Ave, Gikondo, Kigali',
        available_seats=0,
        organizer_id='binary-hub',
        refund_policy='Free event, no refunds applicable',
        dress_code='Formal',
        age_restriction='18+',
    ),
)


REGISTRANTS: tuple[Registrant, ...] = (
    Registrant(
        user_id='user_student_001',
        first_name='Aline',
        last_name='Uwase',
        email='aline.uwase@example.com',
        phone_number='+250788123456',
    ),
    Registrant(
        user_id='user_student_002',
        first_name='Eric',
        last_name='Mugisha',
        email='eric.mugisha@example.com',
        phone_number='+250788654321',
    ),
)


TICKETS: tuple[TicketRecord, ...] = (
    TicketRecord(
        ticket_id='TKT-TECH-CONF-2025-ABC123',
        event_id='tech-conference-2025',
        user_id='user_student_001',
        ticket_type='General Admission',
        price=0,
        currency='RWF',
        status=TicketStatus.CONFIRMED,
        payment_status=PaymentStatus.COMPLETED,
        payment_method='Free Registration',
        purchase_date=_utc('2024-12-10T14:30:00'),
        check_in_status=CheckInStatus.NOT_CHECKED_IN,
        seat_number='A-15',
        special_requirements='Vegetarian meal',
        notes='Student discount applied',
        refundable=True,
        transferable=False,
    ),
    TicketRecord(
        ticket_id='TKT-CULTURAL-FEST-2025-DEF456',
        event_id='cultural-festival-2025',
        user_id='user_student_001',
        ticket_type='VIP Access',
        price=25000,
        currency='RWF',
        status=TicketStatus.CONFIRMED,
        payment_status=PaymentStatus.COMPLETED,
        payment_method='Mobile Money',
        purchase_date=_utc('2024-12-08T10:15:00'),
        check_in_status=CheckInStatus.CHECKED_IN,
        check_in_time=_utc('2025-04-20T09:45:00'),
        seat_number='VIP-5',
        notes='Early bird pricing',
        refundable=False,
        transferable=True,
    ),
    TicketRecord(
        ticket_id='TKT-RESEARCH-SYMP-2025-GHI789',
        event_id='research-symposium-2025',
        user_id='user_student_001',
        ticket_type='Student',
        price=0,
        currency='RWF',
        status=TicketStatus.CONFIRMED,
        payment_status=PaymentStatus.COMPLETED,
        payment_method='Free Registration',
        purchase_date=_utc('2024-12-05T16:20:00'),
    ),
    TicketRecord(
        ticket_id='TKT-CAREER-FAIR-2025-JKL012',
        event_id='career-fair-2025',
        user_id='user_student_001',
        ticket_type='General',
        price=0,
        currency='RWF',
        status=TicketStatus.PENDING,
        payment_status=PaymentStatus.PENDING,
        purchase_date=_utc('2024-12-12T09:45:00'),
    ),
)


ORGANIZERS: tuple[Organizer, ...] = (
    Organizer(
        organizer_id='binary-hub',
        name='Binary Hub',
        description=(
            'Global leader in innovative solutions for various industries. We specialize in '
            'cutting-edge technology development, digital transformation, and strategic '
            'consulting services.'
        ),
        member_count=45,
        founded_date=date(2018, 3, 15),
        website='https://binaryhub.com',
        email='contact@binaryhub.com',
        phone='+250 788 123 456',
        address='KG 15 Ave, Nyarutarama, Kigali, Rwanda',
        tags=('Corporate', 'Technology', 'Innovation'),
        social_media={
            'linkedin': 'https://linkedin.com/company/binary-hub',
            'twitter': 'https://twitter.com/binaryhub',
            'facebook': 'https://facebook.com/binaryhub',
        },
        stats=OrganizerStats(
            total_events=45, total_attendees=2500, average_rating=4.8, upcoming_events=3
        ),
        team=(
            TeamMember(
                id='1',
                name='John Doe',
                role='CEO & Founder',
                bio='Visionary leader with 15+ years in tech industry',
            ),
            TeamMember(
                id='2',
                name='Jane Smith',
                role='CTO',
                bio='Technical expert specializing in AI and machine learning',
            ),
            TeamMember(
                id='3',
                name='Mike Johnson',
                role='Head of Events',
                bio='Event management specialist with global experience',
            ),
        ),
    ),
    Organizer(
        organizer_id='university-of-rwanda',
        name='University Of Rwanda',
        description=(
            'Top Higher Education Institution in Rwanda, committed to excellence in teaching, '
            'research, and community service. We foster innovation and critical thinking '
            'among our students.'
        ),
        member_count=120,
        founded_date=date(2013, 9, 1),
        website='https://ur.ac.rw',
        email='info@ur.ac.rw',
        phone='+250 788 300 000',
        address='University of Rwanda, Kigali Campus, Rwanda',
        tags=('Educational', 'Research', 'Academic'),
        social_media={
            'linkedin': 'https://linkedin.com/school/university-of-rwanda',
            'twitter': 'https://twitter.com/ur_rwanda',
            'facebook': 'https://facebook.com/UniversityofRwanda',
        },
        stats=OrganizerStats(
            total_events=150, total_attendees=15000, average_rating=4.9, upcoming_events=8
        ),
        team=(
            TeamMember(
                id='1',
                name='Prof. Alexandre Lyambabaje',
                role='Vice-Chancellor',
                bio='Distinguished academic leader and researcher',
            ),
            TeamMember(
                id='2',
                name='Dr. Sarah Uwimana',
                role='Deputy Vice-Chancellor Academic',
                bio='Expert in academic affairs and curriculum development',
            ),
        ),
    ),
)
