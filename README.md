# patternkit

`patternkit` is a set of small Python modules. Each module shows one classic
object-oriented design pattern at work. The examples are short enough to read
in one sitting. You can run them and change them. Every module can be imported
and has its own tests. The package depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Creational patterns

- `patternkit.widgets`
  - Abstract factory: `WidgetFactory` with `WinFactory` and `OSXFactory`.
    `factory_for_option("-style:OSX")` returns an `OSXFactory`. Any other
    option returns a `WinFactory`.
  - Factory method: `BaseDialog.init()` with `WinDialog` and `OSXDialog`.
  - A dialog configured by a `Style` value: `StyledDialog(Style(button=..., edit=...))`.
- `patternkit.builder`
  - A `Director` puts a character together from the parts made by a
    `CharacterBuilder`, such as `Korean` or `American`.
  - If no builder is set, `construct()` returns a default set of parts.
- `patternkit.shapes`
  - Template method: `Shape.draw()` wraps `draw_imp()` between "lock mutex" and
    "unlock mutex" lines.
  - `Shape.clone()` raises `UnsupportedOperation` unless a subclass overrides it.
    `Rect` and `Circle` override it.
  - `ShapeFactory.get_instance()` returns a shared factory. `Rect` (key 1) and
    `Circle` (key 2) are already registered in it.
  - `register_shape(key, prototype)` makes `create(key)` return clones of the
    sample shape. `register_creator(key, creator)` makes `create(key)` call the
    creator.
  - `create()` returns `None` for a key that is not registered.
  - `ShapeEditor` keeps a list of shapes. It handles numeric commands with
    `handle()`.
- `patternkit.flyweight`
  - `ImageFactory.get_instance().create(url)` returns a single shared `Image`
    for each URL.

### Structural patterns

- `patternkit.adapter`
  - Class adapter: `Text`.
  - Object adapter: `ObjectAdapter`, which wraps an existing `TextView`.
  - `Stack`: a stack with only `push`, `pop` and `top`, built on a hidden
    container (a `deque` by default). `pop` and `top` raise `IndexError` when
    the stack is empty.
- `patternkit.bridge`
  - `MP3` forwards to an `MP3Device`, which is an `IPod` by default.
  - `MP3` adds `play_one_minute()`.
  - `People.use()` works only with `MP3`.
- `patternkit.composite`
  - `File` and `Folder` share the `Component` base class.
  - `Folder.size()` is the sum of the sizes of everything the folder holds.
- `patternkit.decorator`
  - `Emoticon` and `Frame` wrap any `Drawable`, such as a `PhotoSticker`, and
    can be stacked.
  - `ZipDecorator` and `EncryptDecorator` wrap any `Stream`.
  - `FileStream` opens a file. It can be used as a context manager.
    `FileStream.write()` prints the text followed by " 쓰기". It does not write
    that text into the file.
- `patternkit.facade`
  - `TCPServer.start(ip, port)` binds a real IPv4 TCP socket, listens on it,
    waits for one client and returns the connection.
  - `IPAddress` checks the address and the port when it is created.
  - `Socket` and `TCPServer` can be used as context managers.
- `patternkit.proxy`
  - `DNSProxy` answers known host names from its own table.
  - It passes any other name to a backend `Resolver`. The default backend is
    `DNS`, which sleeps for a configurable delay (3 seconds by default).

### Behavioural patterns

- `patternkit.chain`
  - `Handler.handle()` tries the request itself and otherwise passes it to
    `next`. `Team1`, `Team2` and `Team3` are the example handlers.
  - A `Window` tree in which `fire_lbutton_down()` passes a click up through
    the parents until one of them handles it.
- `patternkit.command`
  - Commands: `AddCommand`, `DrawCommand`, and `Macro`, which can contain other
    macros.
  - `Editor.handle(code)` runs a command and keeps an undo stack. Codes:
    `1` adds a rect, `2` adds a circle, `9` draws, `0` undoes.
- `patternkit.memento`
  - `Graphics.save()` returns a token.
  - `restore(token)` restores the pen width and colour saved under that token.
    It raises `KeyError` for an unknown token.
- `patternkit.observer`
  - A `Table` notifies the `BarGraph` and `PieGraph` observers attached to it.
  - `detach()` raises `ValueError` for a graph that is not attached.
- `patternkit.iterator`
  - `SList` is a singly linked list.
  - It has an explicit Java-style `SListIterator`, with `has_next()` and
    `next()`, and it also supports ordinary Python iteration.
  - `TakeView(container, count)` is a live view of the first `count` items.
- `patternkit.mediator`
  - `LoginMediator` sets `enabled` only when all four of its `CheckBox` and
    `RadioBox` controls are checked.
  - `NotificationCenter` calls the handlers registered under a name.
- `patternkit.state`
  - A `Character` replaces its `run` and `attack` behaviour when it calls
    `acquire_super_item()`.
- `patternkit.strategy`
  - `Edit.get_data(keys)` reads keys until Enter. A pluggable `Validator`
    checks the input, for example `LimitDigitValidator`.
  - `NumEdit` overrides the `validate` hook instead of using a validator.
  - `get_data` raises `EOFError` if the keys run out before the input is
    complete.

## Quick look

```python
from patternkit.composite import File, Folder

root = Folder("ROOT")
a = Folder("A")
root.add(a)
a.add(File("a.txt", 10))
root.add(File("b.txt", 20))
print(root.size())  # 30
```

```python
from patternkit.builder import Director, Korean

director = Director()
director.set_builder(Korean())
print(director.construct())
```

## Command-line demos

Four of the examples can also be run as commands:

```
patternkit-widgets -style:OSX     # draws one button in OSX style; any other option gives Windows style
patternkit-builder [korean|american]   # prints a character built by that builder (korean by default)
patternkit-shapes                 # shape editor reading numbers from standard input
patternkit-command                # editor with undo reading numbers from standard input
```

`patternkit-shapes` takes these commands:

- `1` adds a rect and `2` adds a circle. The other numbers from 3 to 7 add
  nothing unless a shape has been registered under them.
- `8 N` duplicates shape number `N`.
- `9` draws every shape.

`patternkit-command` takes these commands:

- `1` adds a rect and `2` adds a circle.
- `9` draws every shape.
- `0` undoes the last command.

Both editors stop at the end of their input or at the first token that is not
a number.

## What it does not do

- There is no graphical interface.
  - "Drawing" means printing lines of text.
  - `Window` in `patternkit.chain` models only the parent/child tree and the
    click handling. It does not open any window on screen.
  - The mediator's check boxes are plain objects.
- There is no real name lookup. `DNS.resolve` always returns the same fixed
  address.
- There is no real compression or encryption. The stream decorators only
  wrap the text in a label.