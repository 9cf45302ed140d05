# The Fallen Kingdom: Forbidden Quest

This is a small top-down role-playing game built on pygame. You walk around a village and talk to its two inhabitants. You can look through your weapons and your stats, and you can save your progress to one of three save slots.

## Installing

```
pip install .
```

## Playing

```
fallen-kingdom [--root DIR] [--saves DIR]
```

- `--root` is the directory that holds the `assets/` folder. It defaults to the current directory. The game reads images from `assets/img/` and `assets/inv/`, fonts from `assets/fonts/`, music from `assets/sounds/` and the map from `assets/collisions.txt`.
- `--saves` is the directory where save files are read and written. It defaults to the current directory.

Missing assets do not stop the game:

- An image that cannot be found is not drawn.
- If the title font is missing, pygame's default font is used.
- Music that cannot be loaded is not played.
- Without the map file there are no walls and no doors.

### Screens

- **Main menu**: START, LOAD SAVE, OPTIONS and EXIT GAME.
- **Options**: shows the resolution, sound, frame rate and fullscreen entries. Nothing on this page changes a setting. The `<` and `>` arrows start the game, like START does, and "Back" returns to the main menu.
- **Load save**: lists each slot that has a save file. Clicking a slot starts the game with that save's life, position and unlocked weapons. If there are no saves, the page shows "Empty".
- **Game**: the village.
  - When you walk onto a door, the screen fades to black and back.
  - A villager stops its idle animation and shows a speech bubble while you stand near it.
- **Pause menu**: offers "Save game", "Commands" and "Back to main menu". Escape closes it.
- **Inventory**: shows nine weapon slots.
  - Only the first weapon starts unlocked.
  - Clicking an unlocked weapon selects it, and the selected weapon gets a yellow frame.
  - Hovering over a weapon shows its description. Otherwise the description of the selected weapon is shown.
- **Stats**: shows attack, armor, speed, level, experience and life.

### Controls

| Key | Action |
| --- | --- |
| Z / Q / S / D | Move up / left / down / right |
| I | Open the inventory (from the game or the stats page) |
| K | Show your stats (from the inventory) |
| P | Open the pause menu |
| T | Play the fade transition |
| Escape | Go back to the game from the inventory, stats, commands page or pause menu |

### Saves

Saves are named `save1.rpg`, `save2.rpg` and `save3.rpg`, and they are written read-only.

A new save goes into the first free slot among 1 and 2. Otherwise it goes into slot 3, and an existing slot 3 file is overwritten if it can be.

A save is plain text:

```
Life: 10
X: 2304.000000 Y: 2368.000000
Weapon_ids:0
```

## What the game does not do

- There is no combat, although weapons carry damage values.
- There are no enemies, and nothing raises your level, experience or armor.
- The options page does not change the resolution, sound, frame rate or fullscreen mode.

## Using it as a library

Most of the game logic runs without a window.

- `fallen_kingdom.savegame` reads and writes save files:
  - `SaveData` holds what a save records.
  - `format_save` and `parse_save` convert between `SaveData` and the text format.
  - `read_save` and `write_save` work on files.
  - `save_slot_path`, `next_save_path` and `existing_slots` deal with the three slots.
- `fallen_kingdom.collisions` turns a map grid into areas:
  - `collision_areas` gives an area for each `#` cell, and `door_areas` gives one for each `+` cell.
  - `load_collisions` and `load_doors` do the same from a file.
  - `check_position` and `check_door` test a point against those areas.
- `fallen_kingdom.text`:
  - `split_words` splits text on a set of delimiter characters.
  - `load_map` and `read_lines` read map files.
  - `player_position` finds the first `P` in a grid.
- `fallen_kingdom.player.Player` holds the player's stats and inventory.
  - `step` moves the player for the held directions, blocked by obstacles.
  - `heart_frames` and `xp_bar_width` describe the life and experience display.
  - `apply_save` and `to_save` convert to and from `SaveData`.
- `fallen_kingdom.inventory.Inventory` handles weapon selection with `click`, hovering with `hover`, and the shown description with `shown_description`. Use `unlock` and `unlocked_ids` to manage which weapons are unlocked.
- `fallen_kingdom.bots.Bot` animates a villager with `update` and reports whether it is talking.
- `fallen_kingdom.transition.Fade` runs the fade to black with `start`, `update` and `is_opaque`.
- `fallen_kingdom.stats.stat_texts` gives the lines of the stats page.
- `fallen_kingdom.app.Game` ties the scenes together:
  - `handle_event` processes one pygame event.
  - `update` advances the current scene.
  - `draw` renders onto the game surface.
  - `run` opens a window and plays until it is closed.

## Running the tests

```
pip install .[test]
pytest
```