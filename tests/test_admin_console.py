from urllib.parse import unquote

import pytest

from autocenter.core.errors import AuthError, ConfirmationRequiredError, NotFoundError
from autocenter.core.security import decode_session_token
from autocenter.models.common import stage_label
from autocenter.services.admin_service import AdminConsole
from autocenter.services.tracking_service import StatusTracker
from conftest import make_request


@pytest.fixture
def console(local_store, notifier, settings):
    return AdminConsole(local_store, notifier, settings)


def test_login_with_fixed_credentials_issues_session(console, settings):
    session = console.login("Admin@Abu-Almagd.com ", "Atbara2024")
    assert session.email == "admin@abu-almagd.com"
    assert decode_session_token(settings, session.access_token)["sub"] == "admin"


@pytest.mark.parametrize("email,password", [
    ("admin@abu-almagd.com", "wrong"),
    ("someone@else.com", "Atbara2024"),
    ("", ""),
])
def test_login_rejects_bad_credentials(console, email, password):
    with pytest.raises(AuthError):
        console.login(email, password)


def test_tampered_or_foreign_tokens_are_rejected(console, settings):
    session = console.login("admin@abu-almagd.com", "Atbara2024")
    with pytest.raises(AuthError):
        decode_session_token(settings, session.access_token + "x")
    other = settings.model_copy(update={"secret_key": "another-secret"})
    with pytest.raises(AuthError):
        decode_session_token(other, session.access_token)


@pytest.mark.asyncio
async def test_advance_six_times_then_ceiling(console, local_store, notifier):
    await local_store.create(make_request("ABU-4821"))

    for expected in range(1, 7):
        result = await console.advance("ABU-4821", "en")
        assert result.booking.stage == expected
        assert result.changed is True
        assert result.from_label == stage_label(expected - 1, "en")
        assert result.to_label == stage_label(expected, "en")

    seventh = await console.advance("ABU-4821", "en")
    assert seventh.booking.stage == 6
    assert seventh.changed is False
    assert seventh.from_label == seventh.to_label == stage_label(6, "en")
    assert seventh.notification_link is not None
    assert (await local_store.get_by_id("ABU-4821")).stage == 6
    assert len(notifier.sent) == 7


@pytest.mark.asyncio
async def test_advance_builds_link_with_both_labels(console, local_store, notifier):
    await local_store.create(make_request("ABU-4821", stage=2))
    result = await console.advance("ABU-4821", "en")

    text = unquote(result.notification_link)
    assert result.notification_link.startswith("https://wa.me/249912345678?text=")
    assert stage_label(2, "en") in text
    assert stage_label(3, "en") in text
    assert "Omar Hassan" in text
    assert notifier.sent == [("ABU-4821", result.notification_link)]


@pytest.mark.asyncio
async def test_reaching_final_stage_uses_ready_message(console, local_store):
    await local_store.create(make_request("ABU-4821", stage=5))
    result = await console.advance("ABU-4821", "en")
    assert "look forward to seeing you at pickup" in unquote(result.notification_link)


@pytest.mark.asyncio
async def test_notify_toggles_suppress_links(local_store, notifier, settings):
    quiet = settings.model_copy(update={"notify_on_status_update": False, "notify_on_car_ready": False})
    console = AdminConsole(local_store, notifier, quiet)
    await local_store.create(make_request("ABU-4821", stage=4))

    assert (await console.advance("ABU-4821", "en")).notification_link is None
    assert (await console.advance("ABU-4821", "en")).notification_link is None
    assert notifier.sent == []
    assert (await local_store.get_by_id("ABU-4821")).stage == 6


@pytest.mark.asyncio
async def test_advance_unknown_id(console):
    with pytest.raises(NotFoundError):
        await console.advance("ABU-0000", "en")


@pytest.mark.asyncio
async def test_remove_needs_confirmation(console, local_store):
    await local_store.create(make_request("ABU-4821"))
    with pytest.raises(ConfirmationRequiredError):
        await console.remove("ABU-4821", confirmed=False)
    assert await local_store.get_by_id("ABU-4821") is not None


@pytest.mark.asyncio
async def test_removed_request_disappears_from_list_and_tracking(console, local_store):
    await local_store.create(make_request("ABU-4821"))
    await local_store.create(make_request("ABU-1111"))

    assert await console.remove("ABU-4821", confirmed=True) is True
    assert [b.id for b in await console.list()] == ["ABU-1111"]
    assert await StatusTracker(local_store).track("ABU-4821", "en") is None


@pytest.mark.asyncio
async def test_watch_emits_new_snapshot_after_change(console, local_store):
    await local_store.create(make_request("ABU-1001"))
    feed = console.watch()
    try:
        assert [b.id for b in await feed.__anext__()] == ["ABU-1001"]
        await console.advance("ABU-1001", "en")
        [updated] = await feed.__anext__()
        assert updated.stage == 1
    finally:
        await feed.aclose()
