from cengaver.constants import HS_DEAD, HS_MOVELEFT, HS_MOVERIGHT, HS_NONE, HS_WAITING
from cengaver.states import (
    BossEnemy,
    Dead,
    DyingEnemy,
    EnemyState,
    Finished,
    HoppingEnemy,
    Jumping,
    MoveLeft,
    MoveRight,
    PatrollingEnemy,
    RammingEnemy,
    SelectingGadget,
    Waiting,
    WaitingEnemy,
)


class FakeHero:
    def __init__(self):
        self.state = None

    def set_state(self, state):
        self.state = state


class FakeAI:
    def __init__(self):
        self.calls = []

    def enemy_patrol(self, enemy):
        self.calls.append(("patrol", enemy))

    def enemy_hopping(self, enemy):
        self.calls.append(("hop", enemy))

    def enemy_ram(self, enemy):
        self.calls.append(("ram", enemy))

    def enemy_boss(self, enemy):
        self.calls.append(("boss", enemy))

    def enemy_stop(self, enemy):
        self.calls.append(("stop", enemy))

    def remove_from_repository(self, enemy):
        self.calls.append(("remove", enemy))


class FakeEnemy:
    def __init__(self):
        self.state = None
        self.started = 0
        self.ai = FakeAI()

    def set_state(self, state):
        self.state = state

    def set_starting_state(self):
        self.started += 1


def hero_transition(handler):
    """Run a hero state handler on a fresh hero and return the state it chose."""
    hero = FakeHero()
    handler(hero)
    return hero.state


def enemy_transition(handler):
    """Run an enemy state handler on a fresh enemy and return the state it chose."""
    enemy = FakeEnemy()
    handler(enemy)
    return enemy.state


def test_waiting_transitions():
    left = hero_transition(Waiting().press_left_arrow)
    assert isinstance(left, MoveLeft)
    assert (left.name, left.tile) == ("MoveLeft", HS_MOVELEFT)
    right = hero_transition(Waiting().press_right_arrow)
    assert isinstance(right, MoveRight)
    assert (right.name, right.tile) == ("MoveRight", HS_MOVERIGHT)
    jump = hero_transition(Waiting().press_spacebar)
    assert isinstance(jump, Jumping)
    assert jump.name == "Jumping"


def test_moving_transitions():
    left = hero_transition(MoveRight().press_left_arrow)
    assert isinstance(left, MoveLeft)
    assert left.name == "MoveLeft"
    right = hero_transition(MoveLeft().press_right_arrow)
    assert isinstance(right, MoveRight)
    assert right.name == "MoveRight"
    stopped = hero_transition(MoveRight().stop_moving)
    assert isinstance(stopped, Waiting)
    assert stopped.tile == HS_WAITING
    stopped = hero_transition(MoveLeft().stop_moving)
    assert isinstance(stopped, Waiting)
    assert stopped.name == "Waiting"


def test_jumping_ignores_arrows_and_stops():
    hero = FakeHero()
    Jumping().press_left_arrow(hero)
    Jumping().press_spacebar(hero)
    assert hero.state is None
    Jumping().stop_moving(hero)
    assert isinstance(hero.state, Waiting)


def test_common_transitions():
    dead = hero_transition(MoveLeft().touch_enemy)
    assert isinstance(dead, Dead)
    assert (dead.name, dead.tile) == ("Dead", HS_DEAD)
    finished = hero_transition(Waiting().step_on_exit)
    assert isinstance(finished, Finished)
    assert finished.name == "Finished"
    selecting = hero_transition(Jumping().select_gadget)
    assert isinstance(selecting, SelectingGadget)
    assert selecting.name == "UseGadget"


def test_tiles_and_names():
    assert Waiting.tile == HS_WAITING
    assert MoveLeft.tile == HS_MOVELEFT
    assert Dead.tile == HS_DEAD
    assert Jumping.tile == HS_NONE
    assert SelectingGadget.name == "UseGadget"
    assert MoveRight().name == "MoveRight"


def test_enemy_base_exit_viewpoint_waits():
    waiting = enemy_transition(PatrollingEnemy().exit_viewpoint)
    assert isinstance(waiting, WaitingEnemy)
    assert waiting.name == "Waiting"


def test_waiting_enemy_enters_viewpoint():
    enemy = FakeEnemy()
    WaitingEnemy().enter_viewpoint(enemy)
    assert enemy.started == 1
    assert enemy.state is None


def test_enemy_base_execute_does_nothing():
    enemy = FakeEnemy()
    EnemyState().execute(enemy)
    EnemyState().enter_viewpoint(enemy)
    assert enemy.ai.calls == []
    assert enemy.state is None


def test_behaviour_states_call_ai():
    enemy = FakeEnemy()
    PatrollingEnemy().execute(enemy)
    HoppingEnemy().execute(enemy)
    RammingEnemy().execute(enemy)
    BossEnemy().execute(enemy)
    BossEnemy().exit(enemy)
    assert [name for name, _ in enemy.ai.calls] == ["patrol", "hop", "ram", "boss", "stop"]
    assert all(target is enemy for _, target in enemy.ai.calls)


def test_dying_enemy_removes_itself():
    enemy = FakeEnemy()
    DyingEnemy().execute(enemy)
    assert enemy.ai.calls == [("remove", enemy)]