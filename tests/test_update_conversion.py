from types import SimpleNamespace

from models.update import CallbackUpdate, LocationUpdate, MediaUpdate, OtherUpdate, TextUpdate, from_telegram


def _user(user_id=1, first_name="Ana", username="ana"):
    return SimpleNamespace(id=user_id, first_name=first_name, username=username)


def _message(text=None, location=None, photo=None, caption=None, chat_id=10, message_id=77):
    return SimpleNamespace(
        chat=SimpleNamespace(id=chat_id),
        from_user=_user(),
        message_id=message_id,
        text=text,
        location=location,
        photo=photo or [],
        caption=caption,
    )


def _update(message=None, callback_query=None, effective_user=None, effective_chat=None):
    return SimpleNamespace(
        message=message,
        callback_query=callback_query,
        effective_user=effective_user,
        effective_chat=effective_chat,
    )


def test_callback_query_wins():
    query = SimpleNamespace(id="cb-1", data="insp_list:2", from_user=_user(), message=_message())

    result = from_telegram(_update(message=_message(text="hi"), callback_query=query))

    assert result == CallbackUpdate(user_id=1, chat_id=10, data="insp_list:2", callback_id="cb-1", message_id=77)


def test_location_message():
    location = SimpleNamespace(latitude=52.52, longitude=13.405)

    result = from_telegram(_update(message=_message(location=location)))

    assert result == LocationUpdate(user_id=1, chat_id=10, lat=52.52, lon=13.405)


def test_photo_uses_largest_size():
    photo = [SimpleNamespace(file_id="small"), SimpleNamespace(file_id="large")]

    result = from_telegram(_update(message=_message(photo=photo, caption="sunset")))

    assert result == MediaUpdate(user_id=1, chat_id=10, caption="sunset", media_ref="large")


def test_photo_without_caption_has_empty_caption():
    result = from_telegram(_update(message=_message(photo=[SimpleNamespace(file_id="f")])))

    assert isinstance(result, MediaUpdate)
    assert result.caption == ""


def test_text_message_keeps_sender_names():
    result = from_telegram(_update(message=_message(text="/start")))

    assert result == TextUpdate(user_id=1, chat_id=10, text="/start", first_name="Ana", username="ana")


def test_message_without_known_content_is_other():
    result = from_telegram(_update(message=_message()))

    assert result == OtherUpdate(user_id=1, chat_id=10)


def test_update_without_message_is_other():
    result = from_telegram(_update(effective_user=_user(5), effective_chat=SimpleNamespace(id=50)))

    assert result == OtherUpdate(user_id=5, chat_id=50)
    assert from_telegram(_update()) == OtherUpdate()
