from use_cases.validation import (
    validate_checkout,
    validate_email,
    validate_org_code,
    validate_otp_code,
    validate_password,
    validate_signup,
)


def test_email_validation():
    assert validate_email("") == "Email tidak boleh kosong."
    assert validate_email("a@b") == "Format email tidak valid."
    assert validate_email("a b@c.com") == "Format email tidak valid."
    assert validate_email("a@b.com") is None


def test_password_validation():
    assert validate_password("") == "Password tidak boleh kosong."
    assert validate_password("1234567") == "Password minimal 8 karakter."
    assert validate_password("12345678") is None


def test_signup_reports_every_bad_field():
    errors = validate_signup("", "x", "short", "other")

    assert errors == {
        "name": "Nama Lengkap tidak boleh kosong.",
        "email": "Format email tidak valid.",
        "password": "Password minimal 8 karakter.",
        "confirm_password": "Konfirmasi password tidak cocok.",
    }


def test_signup_uses_organization_name_label():
    errors = validate_signup(" ", "org@b.com", "password123", "password123", "Organization")
    assert errors == {"name": "Nama Organisasi tidak boleh kosong."}


def test_valid_signup_has_no_errors():
    assert validate_signup("Sari", "sari@b.com", "password123", "password123") == {}


def test_otp_code_must_be_six_digits():
    assert validate_otp_code("12345") == "Harap masukkan 6 digit kode OTP."
    assert validate_otp_code("12345a") == "Harap masukkan 6 digit kode OTP."
    assert validate_otp_code("123456") is None


def test_org_code_must_not_be_blank():
    assert validate_org_code("   ") == "Kode verifikasi tidak boleh kosong."
    assert validate_org_code("X") is None


def test_checkout_validation():
    errors = validate_checkout("", "x@mailinator.com", "0812-34")
    assert errors == {
        "full_name": "Nama lengkap tidak boleh kosong.",
        "email": "Domain email tidak diizinkan. Harap gunakan email permanen.",
        "phone_number": "Nomor telepon minimal harus 9 digit.",
    }

    assert validate_checkout("Sari", "sari@example.com", "+62 812-3456-7890") == {}
