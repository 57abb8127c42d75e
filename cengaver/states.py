"""State machines for the hero and the enemies."""

from __future__ import annotations

from .constants import HS_DEAD, HS_MOVELEFT, HS_MOVERIGHT, HS_NONE, HS_USEGADGET, HS_WAITING


class State:
    """A named state of a state machine."""

    name = ""


class HeroState(State):
    """Base hero state; transitions call ``hero.set_state``."""

    name = "None"
    tile = HS_NONE

    def touch_enemy(self, hero):
        hero.set_state(Dead())

    def press_right_arrow(self, hero):
        """Ignored unless a subclass reacts to it."""

    def press_left_arrow(self, hero):
        """Ignored unless a subclass reacts to it."""

    def press_spacebar(self, hero):
        """Ignored unless a subclass reacts to it."""

    def stop_moving(self, hero):
        """Ignored unless a subclass reacts to it."""

    def step_on_exit(self, hero):
        hero.set_state(Finished())

    def select_gadget(self, hero):
        hero.set_state(SelectingGadget())


class Waiting(HeroState):
    name = "Waiting"
    tile = HS_WAITING

    def press_left_arrow(self, hero):
        hero.set_state(MoveLeft())

    def press_right_arrow(self, hero):
        hero.set_state(MoveRight())

    def press_spacebar(self, hero):
        hero.set_state(Jumping())


class MoveRight(HeroState):
    name = "MoveRight"
    tile = HS_MOVERIGHT

    def press_left_arrow(self, hero):
        hero.set_state(MoveLeft())

    def stop_moving(self, hero):
        hero.set_state(Waiting())


class MoveLeft(HeroState):
    name = "MoveLeft"
    tile = HS_MOVELEFT

    def press_right_arrow(self, hero):
        hero.set_state(MoveRight())

    def stop_moving(self, hero):
        hero.set_state(Waiting())


class Jumping(HeroState):
    name = "Jumping"

    def stop_moving(self, hero):
        hero.set_state(Waiting())


class SelectGadget(HeroState):
    name = "SelectGadget"


class Finished(HeroState):
    name = "Finished"


class Dead(HeroState):
    name = "Dead"
    tile = HS_DEAD

    def die_sequence(self, hero):
        """The dead hero has no further animation."""


class SelectingGadget(HeroState):
    name = "UseGadget"
    tile = HS_USEGADGET


class EnemyState(State):
    """Base enemy state; leaving the viewpoint puts the enemy to waiting."""

    name = "None"

    def see_hero(self, enemy):
        """Ignored unless a subclass reacts to it."""

    def lose_hero(self, enemy):
        """Ignored unless a subclass reacts to it."""

    def enter_viewpoint(self, enemy):
        """Ignored unless a subclass reacts to it."""

    def exit_viewpoint(self, enemy):
        enemy.set_state(WaitingEnemy())

    def execute(self, enemy):
        """Ignored unless a subclass reacts to it."""

    def exit(self, enemy):
        """Ignored unless a subclass reacts to it."""


class WaitingEnemy(EnemyState):
    name = "Waiting"

    def enter_viewpoint(self, enemy):
        enemy.set_starting_state()


class PatrollingEnemy(EnemyState):
    name = "Patrolling"

    def execute(self, enemy):
        enemy.ai.enemy_patrol(enemy)

    def exit(self, enemy):
        enemy.ai.enemy_stop(enemy)


class HoppingEnemy(EnemyState):
    name = "Hopping"

    def execute(self, enemy):
        enemy.ai.enemy_hopping(enemy)

    def exit(self, enemy):
        enemy.ai.enemy_stop(enemy)


class RammingEnemy(EnemyState):
    name = "Ramming"

    def execute(self, enemy):
        enemy.ai.enemy_ram(enemy)

    def exit(self, enemy):
        enemy.ai.enemy_stop(enemy)


class BossEnemy(EnemyState):
    name = "Boss"

    def execute(self, enemy):
        enemy.ai.enemy_boss(enemy)

    def exit(self, enemy):
        enemy.ai.enemy_stop(enemy)


class DyingEnemy(EnemyState):
    name = "Dying"

    def execute(self, enemy):
        self.exit(enemy)

    def exit(self, enemy):
        enemy.ai.remove_from_repository(enemy)