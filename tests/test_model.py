import pytest

from simonsays.model import Button, Model, Signal


class FakeScheduler:
    def __init__(self):
        self.pending = []

    def __call__(self, delay, callback):
        self.pending.append((delay, callback))

    def delays(self):
        return [delay for delay, _ in self.pending]

    def run_pending(self):
        batch = sorted(self.pending, key=lambda item: item[0])
        self.pending = []
        for _, callback in batch:
            callback()


class FixedChooser:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


class Recorder:
    def __init__(self, model):
        self.events = []
        model.player_turn.connect(lambda turn: self.events.append(("turn", turn)))
        model.play_move.connect(lambda b, s: self.events.append(("move", b, s)))
        model.progress_updated.connect(lambda p: self.events.append(("progress", p)))
        model.game_over.connect(lambda: self.events.append(("over",)))


def make(values):
    scheduler = FakeScheduler()
    model = Model(scheduler, FixedChooser(values))
    return model, scheduler, Recorder(model)


def test_signal_calls_slots_in_order():
    signal = Signal()
    seen = []
    signal.connect(lambda x: seen.append(("a", x)))
    signal.connect(lambda x: seen.append(("b", x)))
    signal.emit(7)
    assert seen == [("a", 7), ("b", 7)]


def test_generated_moves_map_to_button_values():
    model, _, _ = make([0, 1])
    model._generate_next_move()
    model._generate_next_move()
    assert model.sequence == [0, 1]
    assert model.sequence == [Button.RED, Button.BLUE]


def test_start_game_adds_move_and_disables_input():
    model, scheduler, rec = make([1])
    model.start_game()
    assert model.sequence == [Button.BLUE]
    assert rec.events == [("turn", False), ("progress", 0)]
    assert min(scheduler.delays()) == 50
    assert max(scheduler.delays()) == len(model.sequence) * model.speed_factor + 100


def test_sequence_is_played_then_turn_given():
    model, scheduler, rec = make([0])
    model.start_game()
    rec.events.clear()
    scheduler.run_pending()
    assert rec.events == [("move", Button.RED, 1000), ("turn", True)]


def test_completing_round_speeds_up_and_schedules_next():
    model, scheduler, rec = make([0, 1])
    model.start_game()
    scheduler.run_pending()
    rec.events.clear()

    model.handle_player_turn(0)
    assert rec.events == [("progress", 100), ("turn", False)]
    assert model.player_index == 0
    assert model.speed_factor == 900
    assert scheduler.delays() == [1000]

    scheduler.run_pending()
    assert model.sequence == [Button.RED, Button.BLUE]


def test_partial_progress():
    model, scheduler, rec = make([0, 1])
    model.start_game()
    scheduler.run_pending()
    model.handle_player_turn(Button.RED)
    scheduler.run_pending()
    scheduler.run_pending()
    rec.events.clear()
    model.handle_player_turn(Button.RED)
    assert rec.events == [("progress", 50)]
    assert model.player_index == 1


def test_replayed_sequence_uses_current_speed():
    model, scheduler, rec = make([1, 0])
    model.start_game()
    scheduler.run_pending()
    model.handle_player_turn(1)
    scheduler.run_pending()
    rec.events.clear()
    scheduler.run_pending()
    moves = [event for event in rec.events if event[0] == "move"]
    assert [m[1] for m in moves] == [Button.BLUE, Button.RED]
    assert all(m[2] == model.speed_factor for m in moves)


def test_wrong_input_ends_game_and_stops_loop():
    model, scheduler, rec = make([0])
    model.start_game()
    scheduler.run_pending()
    rec.events.clear()
    model.handle_player_turn(1)
    assert model.is_game_over
    assert rec.events == [("over",)]

    model._game_loop()
    assert len(model.sequence) == 1


def test_speed_never_drops_below_floor():
    rounds = 20
    model, scheduler, _ = make([0] * rounds)
    model.start_game()
    speeds = []
    for _ in range(rounds - 1):
        scheduler.run_pending()
        for _ in model.sequence:
            model.handle_player_turn(0)
        speeds.append(model.speed_factor)
        scheduler.run_pending()
    assert speeds == sorted(speeds, reverse=True)
    assert min(speeds) == 300


def test_input_before_start_raises():
    model, _, _ = make([])
    with pytest.raises(RuntimeError):
        model.handle_player_turn(0)


def test_default_rng_produces_valid_moves():
    scheduler = FakeScheduler()
    model = Model(scheduler)
    for _ in range(5):
        model._generate_next_move()
    assert len(model.sequence) == 5
    assert set(model.sequence) <= {Button.RED, Button.BLUE}