"""
Image Mutations Architecture
============================

This module defines how image operations are structured and applied.

- :class:`~container_models.image.ImageContainer` holds the RGBA pixel data.
- :class:`ImageMutation` is an abstract interface for transforming an ImageContainer.
- Concrete mutations live in the ``mutations`` folder, each in its own file.
- Stateless functionality (color-space conversion, blurring, partitioning)
  lives in the ``computations`` folder.

High-level Design
-----------------

                        +---------------------------------+
                        |          ImageContainer         |
                        |---------------------------------|
                        | data : ImageRGBA (H, W, 4)      |
                        +---------------+-----------------+
                                        |
                                        v
                    +-------------------+----------------------+
                    |              <<abstract>>                |
                    |              ImageMutation               |
                    |------------------------------------------|
                    | + apply_on_image(T) -> T                 |
                    | + skip_predicate: bool                   |
                    +--------------------+---------------------+
                                         ^
                                         |
        +---------------------+----------+------------+-------------------+
        |                     |                       |                   |
+-------+----------+  +-------+---------+  +----------+--------+  +-------+-------+
| ChannelOperation |  | ThresholdFilter |  |     PixelSort     |  |   GlowBloom   |
|------------------|  |-----------------|  |-------------------|  |---------------|
| operator         |  | predicate       |  | predicate         |  | threshold     |
| lhs, rhs         |  | mode            |  | direction         |  | radius        |
|                  |  | replacement     |  | reverse           |  | intensity     |
+------------------+  +-----------------+  +-------------------+  +---------------+


Every mutation returns a new ``ImageContainer`` with the dimensions of its
input and leaves the input untouched.

Example
-------

    from returns.pipeline import flow
    from returns.pointfree import bind

    from container_models import ImageContainer, KeyPredicate, ThresholdRange
    from models import SortKey
    from mutations import ChannelOperation, PixelSort
    from mutations.operators import Add

    image = ImageContainer.from_file(Path("input.png"))

    result = flow(
        image,
        ChannelOperation(Add(raw=True)),
        bind(
            PixelSort(
                KeyPredicate(key=SortKey.HUE, ranges=[ThresholdRange(30, 90)])
            )
        ),
    )
"""

from abc import ABC, abstractmethod

from returns.result import safe

from container_models import ImageContainer


class ImageMutation(ABC):
    """
    Represents a single operation applied to an :class:`~container_models.image.ImageContainer`.

    After one `ImageMutation`, the resulting `ImageContainer` must be valid
    input for another mutation. This enables safe chaining in pipelines.

    Skipping logic (for example: a filter without any pixel to replace) can
    be implemented via `skip_predicate`.

    All parameters required for the mutation should be provided via
    the constructor, so invalid configuration fails before any pixel is read.
    """

    @property
    def skip_predicate(self) -> bool:
        """
        Determines whether this mutation should be skipped.

        :return bool:
            - `True`  → return a copy of the input image
            - `False` → apply the mutation
        """
        return False

    @safe
    def __call__(self, image: ImageContainer) -> ImageContainer:
        """
        Callable interface used by pipelines (e.g. `flow(...)` from
        the `returns` library).

        If `skip_predicate` is `True`, a copy of the input `ImageContainer`
        is returned. Otherwise, `apply_on_image` is executed.

        :param image:
            The `ImageContainer` to transform.
        :return ImageContainer:
            A new image with the dimensions of `image`.
        """
        if self.skip_predicate:
            return image.with_data(image.data.copy())
        return self.apply_on_image(image)

    @abstractmethod
    def apply_on_image(self, image: ImageContainer) -> ImageContainer:
        """
        Applies the mutation to the given `ImageContainer`.

        This method must be implemented by concrete mutations and is
        called internally by `__call__` to support pipeline composition.

        :param image:
            The input `ImageContainer`; it must not be modified.
        :return ImageContainer:
            A new `ImageContainer`.
        """
