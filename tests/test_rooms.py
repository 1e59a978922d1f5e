from game.models import Idle, Quizzing
from conftest import make_room


def test_join_unknown_room_fails(colors, broadcaster):
    success, message, player = colors.join_room('NOPE', 'p1', 'Ann')
    assert not success
    assert message == "Room not found"
    assert broadcaster.events == []


def test_first_joiner_is_vip_and_host(colors, broadcaster):
    code = make_room(colors, 'Ann', 'Ben')
    room = colors.registry.get(code)

    assert room.host_id == 'p1'
    assert [p.is_vip for p in room.roster()] == [True, False]
    roster = broadcaster.last('playersUpdate')
    assert [p['name'] for p in roster] == ['Ann', 'Ben']
    assert roster[0]['isVIP'] is True
    assert roster[0]['score'] == 0


def test_vip_is_not_reassigned_when_host_leaves(colors):
    code = make_room(colors, 'Ann', 'Ben')
    colors.leave('p1')
    colors.join_room(code, 'p3', 'Cat')
    room = colors.registry.get(code)

    assert room.host_id == 'p1'
    assert not any(p.is_vip for p in room.roster())


def test_invalid_name_is_rejected(colors):
    code = make_room(colors)
    success, _, _ = colors.join_room(code, 'p1', '   ')
    assert not success
    assert colors.registry.get(code).is_empty


def test_leave_is_idempotent_and_rebroadcasts(colors, broadcaster):
    code = make_room(colors, 'Ann', 'Ben')
    broadcaster.clear()

    assert colors.leave('p2') == [code]
    assert colors.leave('p2') == []
    assert [p['name'] for p in broadcaster.last('playersUpdate')] == ['Ann']
    assert len(broadcaster.named('playersUpdate')) == 1


def test_leave_sweeps_every_room(colors):
    first = make_room(colors, 'Ann')
    second = colors.create_room('screen')[2]
    colors.join_room(second, 'p1', 'Ann')

    assert sorted(colors.leave('p1')) == sorted([first, second])


def test_non_host_cannot_start(colors, broadcaster):
    code = make_room(colors, 'Ann', 'Ben')
    broadcaster.clear()

    assert not colors.start_round(code, 'p2')
    assert broadcaster.events == []
    assert isinstance(colors.registry.get(code).phase, Idle)


def test_creator_may_start(colors):
    code = make_room(colors, 'Ann')
    assert colors.start_round(code, 'screen')
    assert isinstance(colors.registry.get(code).phase, Quizzing)


def test_room_emptied_mid_game_returns_to_idle(questions, timers):
    code = make_room(questions, 'Ann', 'Ben')
    questions.start_game(code, 'p1')
    room = questions.registry.get(code)
    asker = room.phase.asker_id
    other = 'p2' if asker == 'p1' else 'p1'
    questions.answer(code, asker, other)
    assert timers.pending_count(code) == 1

    questions.leave('p1')
    questions.leave('p2')

    assert isinstance(room.phase, Idle)
    assert timers.pending_count(code) == 0


def test_active_rooms_summary_reports_waiting_players(colors):
    code = make_room(colors, 'Ann', 'Ben')
    colors.start_round(code, 'p1')
    colors.submit_answer(code, 'p1', {})

    summary = colors.get_active_rooms()[0]
    assert summary['code'] == code
    assert summary['phase'] == 'quizzing'
    assert summary['submissions']['waitingFor'] == ['p2']
