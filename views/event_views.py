import streamlit as st

import ui
from services import event_catalog
from services.formatting import format_event_time, format_rupiah
from use_cases.domain_models import TransactionFormData
from use_cases.validation import validate_checkout
from utils import session_manager

GENDERS = ("Laki-laki", "Perempuan", "Lainnya")
CHECKOUT_FORM = "checkout_form"
CHECKOUT_TEXT_FIELDS = ("full_name", "email", "phone_number")


def _event_grid(shell, events, key_prefix, columns=3):
    cols = st.columns(columns)
    for index, event in enumerate(events):
        with cols[index % columns]:
            ui.render_event_card(event)
            if st.button("Lihat Detail", key=f"{key_prefix}_{event.id}", use_container_width=True):
                shell.navigate("eventDetail", event)
                st.rerun()


def render_landing(shell):
    st.markdown('<div class="hg-brand">Hegira</div>', unsafe_allow_html=True)
    st.title("Temukan event seru di sekitarmu")
    st.write("Konser, konferensi, pameran, dan festival dalam satu tempat.")

    hero = event_catalog.hero_events(shell.events)
    if hero:
        st.subheader("Sorotan")
        _event_grid(shell, hero, "hero")

    st.subheader("Event Pilihan")
    _event_grid(shell, event_catalog.featured_events(shell.events), "featured")

    if st.button("Lihat Semua Event →", key="landing_all_events"):
        shell.navigate("events")
        st.rerun()


def render_events(shell):
    st.title("Semua Event")
    events = event_catalog.active_events(shell.events)
    if not events:
        st.info("Belum ada event aktif saat ini.")
        return
    _event_grid(shell, events, "catalog")


def _ticket_form_name(event):
    return f"tickets_{event.id}"


def _selected_quantities(event):
    prefix = session_manager.form_key(_ticket_form_name(event))
    return {
        category.id: st.session_state.get(f"{prefix}_{category.id}", 0)
        for category in event.ticket_categories
    }


def render_event_detail(shell):
    event = shell.selected_event
    form_name = _ticket_form_name(event)

    if st.button("← Kembali", key="detail_back"):
        if any(quantity > 0 for quantity in _selected_quantities(event).values()):
            shell.request_navigation_with_confirmation(
                "events",
                reset_callback=lambda: session_manager.reset_form(form_name),
            )
        else:
            shell.navigate("events")
        st.rerun()

    st.caption(f"{event.theme} · {event.category}")
    st.title(event.name)
    col_info, col_tickets = st.columns([3, 2])
    with col_info:
        st.markdown(f"📅 **{event.date_display}**  \n🕒 {format_event_time(event.time_display, event.timezone)}")
        st.markdown(f"📍 {event.location}  \n{event.address}")
        if event.organizer_name:
            st.caption(f"Diselenggarakan oleh {event.organizer_name}")
        st.write(event.full_description)

    with col_tickets:
        st.subheader("Pilih Tiket")
        prefix = session_manager.form_key(form_name)
        for category in event.ticket_categories:
            ui.render_ticket_line(category)
            st.number_input(
                "Jumlah",
                min_value=0,
                max_value=category.max_quantity or 10,
                step=1,
                key=f"{prefix}_{category.id}",
                disabled=category.availability_status == "sold-out",
                label_visibility="collapsed",
            )

        checkout_info = event_catalog.build_checkout(event, _selected_quantities(event))
        if checkout_info is not None:
            st.markdown(f"**Total: {format_rupiah(checkout_info.total_price)}**")
        if st.button("Beli Tiket", key="detail_checkout", type="primary", use_container_width=True):
            if checkout_info is None:
                st.warning("Pilih minimal satu tiket terlebih dahulu.")
            else:
                shell.navigate("checkout", checkout_info)
                st.rerun()


def has_checkout_input(values, default_name=""):
    """True once the buyer has typed or picked anything beyond the prefilled name."""
    for field_name, value in values.items():
        if field_name == "full_name":
            if (value or "").strip() not in ("", default_name.strip()):
                return True
        elif value not in (None, ""):
            return True
    return False


def _checkout_values():
    prefix = session_manager.form_key(CHECKOUT_FORM)
    fields = CHECKOUT_TEXT_FIELDS + ("gender", "date_of_birth")
    return {field_name: st.session_state.get(f"{prefix}_{field_name}") for field_name in fields}


def _reset_checkout():
    session_manager.reset_form(CHECKOUT_FORM)
    st.session_state.pop("checkout_errors", None)


def render_checkout(shell):
    info = shell.checkout_data
    errors = st.session_state.get("checkout_errors", {})
    default_name = shell.display_name if shell.is_logged_in else ""

    if st.button("← Kembali ke Detail Event", key="checkout_back"):
        if has_checkout_input(_checkout_values(), default_name):
            shell.request_navigation_with_confirmation("eventDetail", info.event, reset_callback=_reset_checkout)
        else:
            _reset_checkout()
            shell.navigate("eventDetail", info.event)
        st.rerun()

    st.title("Checkout")
    col_form, col_summary = st.columns([3, 2])
    with col_summary:
        with st.container(border=True):
            st.subheader(info.event.name)
            for ticket in info.selected_tickets:
                st.write(f"{ticket.quantity}x {ticket.category_name} · {format_rupiah(ticket.price_per_ticket)}")
            st.divider()
            st.markdown(f"**Total: {format_rupiah(info.total_price)}**")

    with col_form:
        prefix = session_manager.form_key(CHECKOUT_FORM)
        with st.container(border=True):
            full_name = st.text_input("Nama Lengkap", value=default_name, key=f"{prefix}_full_name")
            if errors.get("full_name"):
                st.caption(f":red[{errors['full_name']}]")
            email = st.text_input("Email", key=f"{prefix}_email")
            if errors.get("email"):
                st.caption(f":red[{errors['email']}]")
            phone_number = st.text_input("Nomor Telepon", key=f"{prefix}_phone_number")
            if errors.get("phone_number"):
                st.caption(f":red[{errors['phone_number']}]")
            gender = st.selectbox("Jenis Kelamin", GENDERS, index=None, placeholder="Pilih", key=f"{prefix}_gender")
            date_of_birth = st.date_input("Tanggal Lahir", value=None, key=f"{prefix}_date_of_birth")
            submitted = st.button("Bayar Sekarang", type="primary", key="checkout_pay")

    if submitted:
        errors = validate_checkout(full_name, email, phone_number)
        st.session_state.checkout_errors = errors
        if not errors:
            form_data = TransactionFormData(
                full_name=full_name.strip(),
                email=email.strip(),
                phone_number=phone_number.strip(),
                gender=gender or "",
                date_of_birth=date_of_birth.isoformat() if date_of_birth else "",
            )
            shell.checkout.process_payment(form_data, info)
            session_manager.reset_form(CHECKOUT_FORM)
        st.rerun()


def render_payment_loading(shell):
    transaction = shell.checkout.transaction
    st.markdown("<br><br>", unsafe_allow_html=True)
    _, col_mid, _ = st.columns([1, 2, 1])
    with col_mid:
        with st.container(border=True):
            st.title("Memproses Pembayaran")
            st.write("Mohon jangan menutup halaman ini.")
            st.markdown(f"Order **{transaction.order_id}** · {format_rupiah(transaction.checkout_info.total_price)}")
            if shell.checkout.processing:
                st.progress(60, text="Menghubungkan ke gateway pembayaran...")
            if st.button("Batalkan Pembayaran", key="payment_cancel", use_container_width=True):
                shell.checkout.cancel_payment()
                st.rerun()


def render_transaction_success(shell):
    transaction = shell.checkout.transaction
    st.success("Pembayaran berhasil!")
    st.title("Terima kasih atas pesanan Anda")
    with st.container(border=True):
        st.markdown(f"**ID Transaksi:** {transaction.transaction_id}  \n**ID Pesanan:** {transaction.order_id}")
        st.markdown(f"**Event:** {transaction.checkout_info.event.name}")
        st.markdown(f"**Pemesan:** {transaction.form_data.full_name} ({transaction.form_data.email})")
        st.markdown(f"**Total:** {format_rupiah(transaction.checkout_info.total_price)}")

    col_ticket, col_home = st.columns(2)
    if col_ticket.button("Lihat E-Tiket", key="success_ticket", type="primary", use_container_width=True):
        shell.navigate("ticketDisplay")
        st.rerun()
    if col_home.button("Kembali ke Beranda", key="success_home", use_container_width=True):
        shell.navigate("landing")
        st.rerun()


def render_ticket_display(shell):
    transaction = shell.checkout.transaction
    event = transaction.checkout_info.event
    st.title("E-Tiket Anda")
    for ticket in transaction.checkout_info.selected_tickets:
        for number in range(1, ticket.quantity + 1):
            with st.container(border=True):
                st.markdown(f"### {event.name}")
                st.markdown(
                    f"🎟️ **{ticket.category_name}** · #{number}  \n"
                    f"📅 {event.date_display} · 🕒 {format_event_time(event.time_display, event.timezone)}  \n"
                    f"📍 {event.location}"
                )
                st.code(f"{transaction.order_id}-{ticket.category_id}-{number}", language=None)
    if st.button("Kembali ke Beranda", key="ticket_home"):
        shell.navigate("landing")
        st.rerun()
