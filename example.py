from bwraster import BWRasterMem, Rectangle, SimpleRasterView


def main():
    raster = BWRasterMem(6, 5)
    raster.enable_flip_mode()

    Rectangle(0, 0, 4, 4).draw(raster)
    Rectangle(1, 1, 2, 2).draw(raster)

    view = SimpleRasterView()
    view.produce(raster)
    view.produce(raster)

    print()

    SimpleRasterView("X", "_").produce(raster)


if __name__ == "__main__":
    main()
