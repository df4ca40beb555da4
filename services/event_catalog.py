"""Sample event catalog used to populate screens and fallback payloads."""

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from use_cases.domain_models import CheckoutInfo, EventRecord, SelectedTicket, TicketCategory

HERO_COUNT = 3
FEATURED_COUNT = 6

SAMPLE_EVENTS = (
    EventRecord(
        id=1,
        category="B2C",
        name="Local Soundscape: Indie Music Night",
        location="Rooftop ITC Depok",
        date_display="2025/06/28 - 2025/06/29",
        time_display="15:00 - 22:00",
        timezone="WIB",
        full_description=(
            "Nikmati malam penuh alunan musik indie dari band-band lokal berbakat di Depok. "
            "Suasana rooftop yang cozy dengan city view menawan."
        ),
        ticket_categories=(
            TicketCategory("regular", "Regular", 75000, "Akses masuk reguler."),
            TicketCategory("vip", "VIP", 150000, "Akses VIP, free drink, dan merchandise.", availability_status="almost-sold"),
        ),
        display_price="Rp 75.000",
        organizer_name="Kolektif Musik Depok",
        summary="Konser musik indie dengan suasana rooftop dan pemandangan kota.",
        status="Aktif",
        theme="Konser Musik",
        address="Jl. Margonda Raya No.56, Depok, Jawa Barat 16431",
        event_slug="local-soundscape-depok",
    ),
    EventRecord(
        id=2,
        category="B2B",
        name="Creator Connect 2025",
        location="Margo City Depok",
        date_display="2025/07/19",
        time_display="09:00 - 17:00",
        timezone="WIB",
        full_description=(
            "Konferensi tahunan untuk para content creator, influencer, dan agensi. "
            "Sesi networking, workshop, dan diskusi panel."
        ),
        ticket_categories=(
            TicketCategory("early-bird-creator", "Early Bird Creator Pass", 200000, availability_status="sold-out"),
            TicketCategory("creator-pass", "Creator Pass", 250000, "Akses semua sesi konferensi."),
            TicketCategory("business-pass", "Business Pass", 500000, "Akses semua sesi + area networking B2B."),
        ),
        display_price="Mulai Rp 250.000",
        organizer_name="Hegira Event Management",
        summary="Konferensi networking dan workshop untuk content creator & influencer.",
        status="Aktif",
        theme="Konferensi & Workshop",
        address="Jl. Margonda Raya No.358, Beji, Kota Depok, Jawa Barat 16423",
        event_slug="creator-connect-2025",
    ),
    EventRecord(
        id=3,
        category="B2G",
        name="Forum Digitalisasi UMKM Nasional",
        location="Hotel Indonesia Kempinski, Jakarta",
        date_display="2025/08/25 - 2025/08/26",
        time_display="08:30 - 17:00",
        timezone="WIB",
        full_description=(
            "Forum strategis yang mempertemukan perwakilan pemerintah, pelaku UMKM, dan penyedia "
            "teknologi untuk akselerasi transformasi digital UMKM."
        ),
        ticket_categories=(
            TicketCategory("umkm-delegate", "Delegasi UMKM", 0, "Gratis untuk UMKM terpilih."),
            TicketCategory("tech-provider", "Penyedia Teknologi/Umum", 750000, "Akses ke semua sesi dan area pameran."),
        ),
        display_price="Gratis / Rp 750.000",
        organizer_name="Kementerian Koperasi dan UKM & Hegira",
        summary="Forum pemerintah & UMKM untuk akselerasi transformasi digital.",
        status="Draf",
        theme="Forum & Pameran",
        address="Jl. M.H. Thamrin No.1, Menteng, Jakarta Pusat 10310",
        event_slug="forum-umkm-digital-2025",
    ),
    EventRecord(
        id=4,
        category="B2C",
        name='Pameran Seni Kontemporer "RuangRupa"',
        location="Galeri Nasional Indonesia, Jakarta",
        date_display="2025/09/05 - 2025/09/15",
        time_display="10:00 - 19:00",
        timezone="WIB",
        full_description="Pameran seni rupa kontemporer yang menampilkan karya-karya terbaru dari seniman muda Indonesia.",
        ticket_categories=(
            TicketCategory("student-pass", "Pelajar/Mahasiswa", 25000, "Wajib menunjukkan kartu pelajar aktif."),
            TicketCategory("general-admission", "Umum", 50000, "Tiket masuk reguler."),
        ),
        display_price="Mulai Rp 25.000",
        organizer_name="Komunitas Seniman Jakarta",
        summary="Pameran karya seni kontemporer dari seniman muda Indonesia.",
        status="Aktif",
        theme="Pameran Seni",
        address="Jl. Medan Merdeka Tim. No.14, Gambir, Jakarta Pusat 10110",
        event_slug="ruangrupa-art-exhibition",
    ),
    EventRecord(
        id=14,
        category="B2C",
        name="Cita Rasa Nusantara Food Festival",
        location="Lapangan Banteng, Jakarta",
        date_display="2025/09/20 - 2025/09/22",
        time_display="11:00 - 21:00",
        timezone="WIB",
        full_description="Festival kuliner yang menyajikan hidangan dari seluruh penjuru Nusantara.",
        ticket_categories=(
            TicketCategory("entry-voucher-50k", "Voucher Masuk + Kuliner Rp 50.000", 50000),
            TicketCategory("entry-voucher-100k", "Voucher Masuk + Kuliner Rp 100.000", 90000),
        ),
        display_price="Mulai Rp 50.000",
        organizer_name="Hegira Culinary",
        summary="Festival kuliner Nusantara dengan ratusan tenant dan demo masak.",
        status="Aktif",
        theme="Festival Kuliner",
        address="Ps. Baru, Sawah Besar, Jakarta Pusat",
        event_slug="cita-rasa-nusantara-fest",
    ),
    EventRecord(
        id=15,
        category="B2C",
        name="Hegira E-Champions Cup 2025",
        location="Online & BritAma Arena, Jakarta",
        date_display="2025/12/01 - 2025/12/15",
        time_display="Sesuai Jadwal Pertandingan",
        timezone="WIB",
        full_description="Turnamen e-sport dengan babak kualifikasi online dan grand final offline di BritAma Arena.",
        ticket_categories=(
            TicketCategory("spectator-online", "Tiket Nonton Online (Kualifikasi)", 0),
            TicketCategory("spectator-venue-gf", "Tiket Nonton Grand Final (Venue)", 100000, availability_status="almost-sold"),
        ),
        display_price="Gratis / Mulai Rp 100.000",
        organizer_name="Hegira Gaming Division",
        summary="Turnamen e-sport dengan kualifikasi online dan grand final offline.",
        status="Selesai",
        theme="Turnamen E-Sport",
        address="Jl. Raya Kelapa Nias, Kelapa Gading, Jakarta Utara 14240",
        event_slug="hegira-echampions-cup-2025",
    ),
)


def load_sample_events() -> List[EventRecord]:
    return list(SAMPLE_EVENTS)


def hero_events(events: Sequence[EventRecord]) -> List[EventRecord]:
    return list(events[:HERO_COUNT])


def featured_events(events: Sequence[EventRecord]) -> List[EventRecord]:
    return list(events[:FEATURED_COUNT])


def active_events(events: Iterable[EventRecord]) -> List[EventRecord]:
    return [event for event in events if event.status == "Aktif"]


def find_event(events: Iterable[EventRecord], event_id: int) -> Optional[EventRecord]:
    return next((event for event in events if event.id == event_id), None)


def build_checkout(event: EventRecord, quantities: dict) -> Optional[CheckoutInfo]:
    """Turn {category_id: quantity} into a CheckoutInfo; None when nothing is selected."""
    selected = tuple(
        SelectedTicket(category.id, category.name, int(quantities[category.id]), category.price)
        for category in event.ticket_categories
        if quantities.get(category.id, 0) > 0
    )
    if not selected:
        return None
    total = sum(ticket.quantity * ticket.price_per_ticket for ticket in selected)
    return CheckoutInfo(event=event, selected_tickets=selected, total_price=total)


def events_frame(events: Sequence[EventRecord]) -> pd.DataFrame:
    """Tabular view of the catalog for dashboard listings."""
    columns = ["ID", "Nama", "Tema", "Tanggal", "Lokasi", "Status", "Kategori Tiket"]
    rows = [
        {
            "ID": event.id,
            "Nama": event.name,
            "Tema": event.theme,
            "Tanggal": event.date_display,
            "Lokasi": event.location,
            "Status": event.status,
            "Kategori Tiket": len(event.ticket_categories),
        }
        for event in events
    ]
    return pd.DataFrame(rows, columns=columns)
