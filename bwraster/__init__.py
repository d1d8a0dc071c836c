from .errors import InvalidArgument, RasterError
from .raster import BWRaster, BWRasterMem
from .shapes import AbstractOval, AbstractQuadrangle, Circle, Ellipse, GeometricShape, Rectangle, Square
from .views import ImageRasterView, RasterView, SimpleRasterView, StringRasterView
