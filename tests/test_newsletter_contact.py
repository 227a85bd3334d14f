import pytest


# --------------------------------------------------------------------------- #
# Newsletter
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_subscribe_normalizes_and_upserts(offline_services):
    newsletter = offline_services.newsletter

    first = await newsletter.subscribe("  Ada@Example.COM ")
    second = await newsletter.subscribe("ada@example.com", "Ada L")

    assert first["id"] == second["id"]
    assert second["name"] == "Ada L"
    emails = [s["email"] for s in await newsletter.get_subscribers()]
    assert emails.count("ada@example.com") == 1


@pytest.mark.asyncio
async def test_unsubscribe_is_idempotent(offline_services):
    newsletter = offline_services.newsletter

    once = await newsletter.unsubscribe("john.doe@example.com")
    twice = await newsletter.unsubscribe("john.doe@example.com")

    assert once["subscribed"] is False
    assert twice["subscribed"] is False
    assert await newsletter.check_subscription("John.Doe@example.com") == {"subscribed": False}


@pytest.mark.asyncio
async def test_unknown_email_is_not_subscribed(offline_services):
    assert await offline_services.newsletter.unsubscribe("nobody@example.com") is None
    assert await offline_services.newsletter.check_subscription("nobody@example.com") == {"subscribed": False}


@pytest.mark.asyncio
async def test_subscribe_requires_email(offline_services):
    with pytest.raises(ValueError):
        await offline_services.newsletter.subscribe("   ")


@pytest.mark.asyncio
async def test_remote_subscribe_sends_welcome(online_services, backend):
    record = await online_services.newsletter.subscribe("grace@example.com", "Grace")

    assert record["subscribed"] is True
    assert await online_services.newsletter.check_subscription("grace@example.com") == {"subscribed": True}
    assert backend.state.sent_emails[-1]["type"] == "newsletter_welcome"
    assert backend.state.sent_emails[-1]["data"] == {"name": "Grace"}

    await online_services.newsletter.unsubscribe("grace@example.com")
    assert backend.state.store.get_subscriber("grace@example.com")["subscribed"] is False


# --------------------------------------------------------------------------- #
# Contact
# --------------------------------------------------------------------------- #
MESSAGE = {"name": "Ada", "email": "ada@example.com", "subject": "Sizing", "message": "Do the shorts run small?"}


@pytest.mark.asyncio
async def test_local_contact_message(offline_services):
    message = await offline_services.contact.send_message(MESSAGE)

    assert message["status"] == "new"
    assert message["id"].startswith("msg_")
    assert len(await offline_services.contact.get_messages()) == 2

    updated = await offline_services.contact.update_message_status(message["id"], "read")
    assert updated["status"] == "read"


@pytest.mark.asyncio
async def test_contact_requires_name_email_and_message(offline_services):
    with pytest.raises(ValueError) as exc_info:
        await offline_services.contact.send_message({"name": "Ada", "message": " "})
    assert "email" in str(exc_info.value)


@pytest.mark.asyncio
async def test_remote_contact_sends_acknowledgment(online_services, backend):
    message = await online_services.contact.send_message(MESSAGE)

    assert backend.state.store.get_all_messages()[-1]["id"] == message["id"]
    assert backend.state.sent_emails[-1]["type"] == "contact_acknowledgment"
    assert backend.state.sent_emails[-1]["to"] == "ada@example.com"

    updated = await online_services.contact.update_message_status(message["id"], "replied")
    assert updated["status"] == "replied"


class FailingEmailClient:
    async def send_newsletter_welcome(self, email, name=None):
        raise RuntimeError("email service down")


@pytest.mark.asyncio
async def test_welcome_failure_does_not_fail_subscribe(online_services, backend):
    online_services.newsletter.email_client = FailingEmailClient()

    record = await online_services.newsletter.subscribe("linus@example.com")

    assert record["subscribed"] is True
    assert backend.state.store.get_subscriber("linus@example.com") is not None
    assert [f.name for f in online_services.notifications.failures] == ["newsletter_welcome"]
