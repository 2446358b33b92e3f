# viengine

`viengine` holds building blocks for a small game engine. It is written in pure
Python and needs nothing beyond the standard library (Python 3.10 or later).

## What is in it

| Module | What it gives you |
| --- | --- |
| `viengine.events` | Window, keyboard and mouse event types and an `EventDispatcher` |
| `viengine.keycodes` | `EKeyCode`, `EMouseButton` and `EKeyState` enumerations |
| `viengine.input` | `KeyboardInput`, `MouseInput` and `InputState`, fed by a polling function |
| `viengine.window` | The `NativeWindow` interface and a display-less `HeadlessWindow` |
| `viengine.timing` | `Time`, a frame delta with a time scale |
| `viengine.frame` | `PerFrameData`, which holds a frame index and a catch-up flag |
| `viengine.identity` | `get_uuid` and `get_type_uuid`, random non-zero 64-bit ids |
| `viengine.entities` | `EntityManager`: live entity ids and a queue of ids to reuse |
| `viengine.ecs_types` | `ESystemPriority` and the id type aliases |
| `viengine.allocators` | `LinearAllocator`, `StackAllocator`, `PoolAllocator` and alignment helpers |
| `viengine.memory` | `MemoryManager`, `MemoryMonitor` and `GlobalMemoryUsage` |
| `viengine.chunks` | `MemoryChunkManager`, which pools objects in fixed-size chunks |
| `viengine.render_queue` | `RenderCommandQueue`, which records callbacks and runs them later |
| `viengine.renderer_api` | `ERendererSpec`, `ERendererMode`, `ERendererResource`, `ERendererPrimitive` |
| `viengine.glsl` | `parse_glsl`, `load_shader_sources` and the OpenGL enum values |
| `viengine.logger` | `init_logging`, `core_logger`, `client_logger` and a `TRACE` level |

## Events

A dispatcher calls the listeners registered for an event's exact type. It goes
through them in order and stops at the first one that returns true.
`dispatch` reports whether some listener handled the event.

```python
from viengine.events import EventDispatcher, KeyPressedEvent
from viengine.keycodes import EKeyCode

dispatcher = EventDispatcher()
dispatcher.add_event_listener(KeyPressedEvent, lambda e: e.is_key(EKeyCode.ESCAPE))

handled = dispatcher.dispatch(KeyPressedEvent(EKeyCode.ESCAPE.value))  # True
```

## Input and a headless window

`KeyboardInput` and `MouseInput` ask a polling function for the state of a code.
`get_value` returns 1 while the key or button is pressed or held. `MouseInput`
also keeps the last position, offset and scroll.

`HeadlessWindow` queues the events you give to `post_event`. It hands them to
its dispatcher on `poll_events`. `close()` makes `should_close()` true. The
`config` passed to `init` needs `width` and `height` attributes. You can also
give the window a clock function to control `time_seconds()`.

## Time

`Time` supports `+=` and `-=` and comparisons, against another `Time` or a
plain number:

```python
from viengine.timing import Time

t = Time(0.12)
while t > 0.05:
    t -= 0.05
```

## Memory accounting

The allocators keep count of the addresses they hand out from a reserved range.
They never touch real memory. When a request cannot be served, the allocator
raises `AllocatorError`.

- `LinearAllocator` only bumps forward. It is emptied as a whole with `clear`.
- `StackAllocator` frees last-in, first-out.
- `PoolAllocator` hands out equal chunks from a free list.

`MemoryManager` pairs a per-frame allocator with a stack allocator:

- `update` drops the frame's memory.
- `new_on_stack(usage, factory, ...)` builds an object and records its block.
- `free_on_stack` releases a block. A block released out of order waits until
  the blocks above it are released.
- `detect_memory_leaks` logs and returns the blocks that were never released.

Every manager registers itself with the process-wide `MemoryMonitor.get()`.
`GlobalMemoryUsage.get()` is an engine-wide manager, and its `free_on_stack`
takes the object back rather than an address.

`MemoryChunkManager(object_type, usage, max_objects_per_chunk)` builds objects
with `new_object`. It opens a new chunk when all chunks are full, and releases
objects with `free_object`. You can iterate over the live objects and take
their count with `len`. `reset` releases every chunk.

## Render queue and shaders

`RenderCommandQueue.enqueue(callback, frame_index)` records a callback.
`process_and_render()` runs the recorded callbacks in order. Callbacks recorded
while it runs wait for the next call.

`parse_glsl` splits one source into stages, keyed by its `#type vertex` and
`#type fragment` lines. It raises `ShaderSyntaxError` for an unknown stage or
an unterminated type line. `load_shader_sources` reads the file first and
yields an empty dict if the file cannot be read. `gl_usage_mode` and
`gl_primitive` map the renderer enums to OpenGL constants.

## Entities

`EntityManager.next_id()` returns the oldest released id, or a fresh random one
if none was released. `release_for_reuse` removes an entity and queues its id.
You can test membership with `in` and count the entities with `len`.

## What the package does not do

The package has none of these:

- an application main loop
- a layer stack
- per-type component storage
- system scheduling
- a type hierarchy for casts
- a renderer front end
- GPU resource objects

It opens no real window and draws nothing. There is no command to run. Those
parts are left to the program that uses these blocks.

## Running the tests

Install the `test` extra and run `pytest` from the project root.