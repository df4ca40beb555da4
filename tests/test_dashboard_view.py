from views.dashboard_view import dashboard_title


def test_dashboard_title_differs_per_business_role():
    assert dashboard_title("creator") == "Dashboard Kreator"
    assert dashboard_title("organization") == "Dashboard Organisasi"
    assert dashboard_title("creator") != dashboard_title("organization")


def test_dashboard_title_falls_back_for_other_roles():
    assert dashboard_title(None) == "Hegira Dashboard"
