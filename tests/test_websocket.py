def last_view(socket_client):
    events = [event for event in socket_client.get_received() if event["name"] == "state"]
    assert events
    return events[-1]["args"][0]["view"]


def test_connect_sends_current_game(socket_client):
    view = last_view(socket_client)
    assert view["phase"] == "playing"
    assert view["current_input"] == ""


def test_keys_are_applied_in_order(socket_client):
    socket_client.get_received()
    for key in "slate":
        socket_client.emit("key", {"key": key})
    socket_client.emit("key", {"key": "Backspace"})
    assert last_view(socket_client)["current_input"] == "slat"


def test_bad_payload(socket_client):
    socket_client.get_received()
    socket_client.emit("key", "a")
    received = socket_client.get_received()
    assert received[-1]["name"] == "error"


def test_new_game_event(socket_client, service):
    socket_client.emit("key", {"key": "c"})
    socket_client.emit("new_game")
    view = last_view(socket_client)
    assert view["notice"] == "New game!"
    assert service.state.current_input == ""
