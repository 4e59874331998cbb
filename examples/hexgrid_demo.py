from rich.console import Console

from hextille import Cube, Direction, boundaries, create, distance, has_neighbours
from hextille.render import render_panel

grid = create(3, 4, -2, -1)
tile = Cube(0, 0, 0)


if __name__ == "__main__":
    console = Console()
    console.print("bounds:", boundaries(grid))
    console.print("neighbours of", tile, has_neighbours(grid, tile))
    console.print("distance to corner:", distance(tile, Cube(2, 2, -4)))
    console.print(render_panel(grid))
    console.print("east of origin present:", has_neighbours(grid, tile)[Direction.EAST])
