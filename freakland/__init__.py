"""Game-logic core for a first-person exploration game: input, collision, controller, cameras, meshes and scenes."""

__version__ = "0.2.0"