# cengaver

A tile-based side-scrolling platform game built on pygame. Guide the hero through
the levels, collect stars for your highscore, carry health packs and keys in an
eight-slot inventory, unlock doors, and deal with enemies that patrol, hop, ram or,
in the boss's case, switch between hopping and ramming.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
cengaver
```

Options:

- `--params PATH`: the parameter file (default `Resources/Params.ini`).
- `--save PATH`: the save file (default: see *Saved games* below).

The game reads its data relative to the current directory:

- `Resources/Params.ini`, section `[params]`: `GRAVITY`, `FRICTION_MAX`,
  `HERO_MAX_HEALTH`, `PARALAXSPEED1`, `PARALAXSPEED2`, `ANIMATIONSPEED`,
  `CURRENTTIME` (the time limit in seconds) and `TILESPROPERTIES` (the path of the
  tile properties file, whose sections `pref0`, `pref1`, ... describe each tile).
  Missing keys fall back to built-in defaults.
- `Levels/level1.properties` to `Levels/level4.properties`: the levels. Each is an INI
  file with a map section (`width`, `height`, `map`) and a section for each
  `enemy...` and `gadget...` placed in the level (`id`, `x`, `y`).
- `Resources/*.bmp`: the pictures the game draws. A picture that cannot be loaded is
  simply not drawn.

The package itself ships none of these data files; you supply them.

A title picture is shown first, then a splash screen (Return skips it), then the
menu. Use Up and Down to move through the menu and Return to choose:

- **New**: start a new game at level 1.
- **Load**: while a game started in this session is past its first level, restart
  it from the level recorded in the save file.
- **Credits**: show the credits screen.
- **Exit**: quit.

Press `R` in the menu to return to a game you left with Escape.

### Controls

| Key              | Action                                    |
|------------------|-------------------------------------------|
| Left / Right     | walk                                      |
| Down             | stop                                      |
| Space            | jump                                      |
| Z / X            | select the previous / next inventory slot |
| 1 to 8           | select an inventory slot directly         |
| E                | use the selected gadget                   |
| Backspace        | drop the selected gadget                  |
| Escape           | go back to the menu                       |
| F5               | toggle debug mode                         |

In debug mode, keypad 1, 2, 3 and 5 scroll the view, `D` hurts the hero and `M`
drains its health, and the collision tiles and state names are drawn.

Jump on an enemy to hurt it; running into one hurts you. Stars raise your score;
other gadgets go into the inventory. A health pack holds ten doses of one health
point each. Touching a door while carrying a key opens it. The boss drops a key
when it is beaten. When the level timer runs out the hero loses 100 health and the
timer starts again.

## Saved games

After each finished level the game writes the level, the remaining time, the hero's
health, the highscore and the best time to `Save.sav` in the application data folder
(`%PROGRAMDATA%` on Windows, `$XDG_DATA_HOME` or `~/.local/share` elsewhere), unless
`--save` names another file. The highscore and best time are read back at start-up.

## Using it as a library

`cengaver.app.App` runs the whole program one tick at a time: `App.tick(keys)` takes
the set of key names held down (for example `{"left", "space"}`) and `App.draw(surface)`
draws onto a pygame surface. `cengaver.game.Game` is a single play-through with the
same `update(keys)` / `draw(surface)` pair, and `cengaver.level.Level` holds a tile
map with its enemies and gadgets.

## Running the tests

```
pip install ".[test]"
pytest
```