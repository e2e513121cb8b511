"""
Rendering engine

- frame_buffer: FrameBuffer grid + ANSI serialization
- rasterizer: clipping, line drawing, block fill, glyph ramp
- scheduler: PlaylistScheduler loop
- terminal: terminal size source
"""
