import random

from game.models import Answering, Finished
from game.questions import open_questions, answer_question
from game.questions_manager import QuestionsManager
from conftest import make_room


def test_open_questions_uses_every_question_once():
    questions = ['q1', 'q2', 'q3', 'q4']
    phase = open_questions(questions, ['a', 'b'], random.Random(1))
    assert sorted(phase.questions) == questions
    assert phase.asker_id in ('a', 'b')
    assert phase.round_index == 0
    assert phase.is_open


def test_answer_passes_the_turn_to_the_target():
    phase = Answering(questions=['q1', 'q2'], round_index=0, asker_id='a')
    outcome = answer_question(phase, 'b')

    assert (outcome.question, outcome.asked_by, outcome.answered_by) == ('q1', 'a', 'b')
    assert not outcome.is_game_over
    assert phase.asker_id == 'b'
    assert phase.current_question == 'q2'
    assert not phase.is_open


def test_answering_last_question_is_game_over():
    phase = Answering(questions=['q1'], round_index=0, asker_id='a')
    assert answer_question(phase, 'b').is_game_over


def test_full_ping_pong(questions, broadcaster, timers):
    code = make_room(questions, 'Ann', 'Ben')
    assert questions.start_game(code, 'p1')

    first = broadcaster.last('newQuestion')
    asker = first['askedBy']
    target = 'p2' if asker == 'p1' else 'p1'

    success, _ = questions.answer(code, asker, target)
    assert success
    assert broadcaster.last('questionAnswered') == {
        'question': first['question'], 'askedBy': asker, 'answeredBy': target
    }
    assert len(broadcaster.named('newQuestion')) == 1

    # answers are closed until the delayed question goes out
    success, _ = questions.answer(code, target, asker)
    assert not success

    timers.run_pending()
    second = broadcaster.last('newQuestion')
    assert second['askedBy'] == target
    assert second['question'] != first['question']


def test_only_current_asker_may_answer(questions, broadcaster):
    code = make_room(questions, 'Ann', 'Ben')
    questions.start_game(code, 'p1')
    asker = broadcaster.last('newQuestion')['askedBy']
    other = 'p2' if asker == 'p1' else 'p1'

    success, message = questions.answer(code, other, asker)
    assert not success
    assert message == "Not your turn to ask"


def test_target_must_be_in_room(questions, broadcaster):
    code = make_room(questions, 'Ann', 'Ben')
    questions.start_game(code, 'p1')
    asker = broadcaster.last('newQuestion')['askedBy']

    success, _ = questions.answer(code, asker, 'ghost')
    assert not success


def test_running_out_of_questions_ends_game(broadcaster, timers):
    manager = QuestionsManager(broadcaster, timers, rng=random.Random(2), questions=['only one'])
    code = make_room(manager, 'Ann', 'Ben')
    manager.start_game(code, 'p1')
    asker = broadcaster.last('newQuestion')['askedBy']
    target = 'p2' if asker == 'p1' else 'p1'

    manager.answer(code, asker, target)

    assert broadcaster.named('gameOver') == [{}]
    assert isinstance(manager.registry.get(code).phase, Finished)
    assert timers.run_pending() == 0


def test_asker_leaving_passes_the_question_on(questions, broadcaster):
    code = make_room(questions, 'Ann', 'Ben', 'Cat')
    questions.start_game(code, 'p1')
    first = broadcaster.last('newQuestion')

    questions.leave(first['askedBy'])

    again = broadcaster.last('newQuestion')
    assert again['question'] == first['question']
    assert again['askedBy'] != first['askedBy']
    assert again['askedBy'] in questions.registry.get(code).players


def test_pending_question_skips_departed_asker(questions, broadcaster, timers):
    code = make_room(questions, 'Ann', 'Ben', 'Cat')
    questions.start_game(code, 'p1')
    asker = broadcaster.last('newQuestion')['askedBy']
    target = next(pid for pid in ('p1', 'p2', 'p3') if pid != asker)
    questions.answer(code, asker, target)

    questions.leave(target)
    timers.run_pending()

    announced = broadcaster.last('newQuestion')
    assert announced['askedBy'] != target
    assert announced['askedBy'] in questions.registry.get(code).players


def test_deleted_room_does_not_fire_pending_question(questions, broadcaster, timers):
    code = make_room(questions, 'Ann', 'Ben')
    questions.start_game(code, 'p1')
    asker = broadcaster.last('newQuestion')['askedBy']
    questions.answer(code, asker, 'p2' if asker == 'p1' else 'p1')
    count = len(broadcaster.named('newQuestion'))

    questions.registry.delete(code)
    timers.run_pending()

    assert len(broadcaster.named('newQuestion')) == count
