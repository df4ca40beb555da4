"""Entry validation for the auth and checkout forms.

Validators return a mapping of field name to message; an empty mapping
means the input may be submitted. Nothing here touches flow state.
"""

import re
from typing import Dict, Optional

from use_cases.simulation import OTP_LENGTH

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CHECKOUT_EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
MIN_PASSWORD_LENGTH = 8
MIN_PHONE_DIGITS = 9
DISALLOWED_EMAIL_DOMAINS = frozenset({
    "temp-mail.org",
    "10minutemail.com",
    "mailinator.com",
    "guerrillamail.com",
    "throwawaymail.com",
    "tempr.email",
    "burner.email",
})

FieldErrors = Dict[str, str]


def validate_email(email: str) -> Optional[str]:
    if not email.strip():
        return "Email tidak boleh kosong."
    if not EMAIL_RE.match(email):
        return "Format email tidak valid."
    return None


def validate_password(password: str) -> Optional[str]:
    if not password:
        return "Password tidak boleh kosong."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password minimal {MIN_PASSWORD_LENGTH} karakter."
    return None


def name_label(role_label: Optional[str]) -> str:
    return "Nama Organisasi" if role_label == "Organization" else "Nama Lengkap"


def validate_login(email: str, password: str) -> FieldErrors:
    errors = {}
    email_error = validate_email(email)
    if email_error:
        errors["email"] = email_error
    password_error = validate_password(password)
    if password_error:
        errors["password"] = password_error
    return errors


def validate_signup(name: str, email: str, password: str, confirm_password: str, role_label: Optional[str] = None) -> FieldErrors:
    errors = {}
    if not name.strip():
        errors["name"] = f"{name_label(role_label)} tidak boleh kosong."
    errors.update(validate_login(email, password))
    if password != confirm_password:
        errors["confirm_password"] = "Konfirmasi password tidak cocok."
    return errors


def validate_otp_code(code: str) -> Optional[str]:
    if len(code) != OTP_LENGTH or not code.isdigit():
        return f"Harap masukkan {OTP_LENGTH} digit kode OTP."
    return None


def validate_org_code(code: str) -> Optional[str]:
    if not code.strip():
        return "Kode verifikasi tidak boleh kosong."
    return None


def validate_checkout(full_name: str, email: str, phone_number: str) -> FieldErrors:
    """Buyer details on the checkout form."""
    errors = {}
    if not full_name.strip():
        errors["full_name"] = "Nama lengkap tidak boleh kosong."

    if not email:
        errors["email"] = "Email tidak boleh kosong."
    elif not CHECKOUT_EMAIL_RE.match(email):
        errors["email"] = "Format email tidak valid."
    elif email[email.rfind("@") + 1:].lower() in DISALLOWED_EMAIL_DOMAINS:
        errors["email"] = "Domain email tidak diizinkan. Harap gunakan email permanen."

    digits = re.sub(r"\D", "", phone_number)
    if not digits:
        errors["phone_number"] = "Nomor telepon tidak boleh kosong."
    elif len(digits) < MIN_PHONE_DIGITS:
        errors["phone_number"] = f"Nomor telepon minimal harus {MIN_PHONE_DIGITS} digit."
    return errors
