from progress.bar import Bar

from grid import Cell

class CarveProgress(Bar) :
    suffix = "%(phase)s | Cells: %(index)d/%(max)d | %(percent).1f%%"

    def __init__(self, *args, **kwargs) :
        self.phase = "Carving"
        super().__init__(*args, **kwargs)

    def cell_carved(self, _cell: Cell) :
        self.next()

    def carving_done(self) :
        self.phase = "Done"
        self.update()
        self.finish()
