"""Static partner listings and help articles shown on the business pages."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Company:
    id: str
    name: str
    sector: str
    city: str
    description: str
    services: Tuple[str, ...] = ()
    contact_email: str = ""


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    category: str
    summary: str


COMPANIES = (
    Company(
        id="hegira-em",
        name="Hegira Event Management",
        sector="Event Organizer",
        city="Depok",
        description="Penyelenggara konferensi, workshop, dan festival berskala nasional.",
        services=("Manajemen venue", "Ticketing", "Registrasi peserta"),
        contact_email="partnership@hegira.id",
    ),
    Company(
        id="kolektif-musik",
        name="Kolektif Musik Depok",
        sector="Musik & Hiburan",
        city="Depok",
        description="Komunitas musisi independen yang rutin menggelar konser lokal.",
        services=("Booking artis", "Produksi panggung"),
        contact_email="halo@kolektifmusik.id",
    ),
    Company(
        id="hegira-culinary",
        name="Hegira Culinary",
        sector="Kuliner",
        city="Jakarta",
        description="Kurator festival kuliner Nusantara dan pasar makanan akhir pekan.",
        services=("Kurasi tenant", "Demo masak", "Sponsorship"),
        contact_email="culinary@hegira.id",
    ),
)

ARTICLES = (
    Article(
        id="tips-tiket",
        title="5 Tips Membeli Tiket Event dengan Aman",
        category="Panduan",
        summary="Cara memastikan tiket yang Anda beli asli dan transaksi tetap aman.",
    ),
    Article(
        id="creator-mulai",
        title="Memulai Sebagai Event Creator di Hegira",
        category="Kreator",
        summary="Langkah awal membuat event pertama, dari draf hingga publikasi.",
    ),
    Article(
        id="b2b-networking",
        title="Memaksimalkan Networking di Event B2B",
        category="Bisnis",
        summary="Strategi sederhana agar kehadiran Anda di konferensi membuahkan relasi baru.",
    ),
)

FAQ = (
    ("Bagaimana cara membeli tiket?", "Pilih event, tentukan jumlah tiket, lalu isi data pemesan di halaman checkout."),
    ("Apakah tiket bisa dibatalkan?", "Kebijakan pembatalan mengikuti ketentuan masing-masing penyelenggara event."),
    ("Bagaimana menjadi Event Creator?", "Masuk atau daftar sebagai Event Creator, kemudian buat event dari dashboard."),
    ("Apa itu akun Organisasi?", "Akun Organisasi memerlukan kode verifikasi dari tim Hegira sebelum dapat digunakan."),
)


def list_companies() -> List[Company]:
    return list(COMPANIES)


def find_company(companies: Iterable[Company], company_id: str) -> Optional[Company]:
    return next((company for company in companies if company.id == company_id), None)


def list_articles() -> List[Article]:
    return list(ARTICLES)
