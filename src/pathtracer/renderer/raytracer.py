# renderer/raytracer.py
import copy
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.image import Image
from pathtracer.geometry.hittable import Hittable


class RenderError(RuntimeError):
    """Raised when a render thread fails. No partial image is produced."""


def start_render(executor: ThreadPoolExecutor, camera: Camera, world: Hittable,
                 target: Image, samples: float, num_threads: int,
                 log: bool = False) -> List[Future]:
    """
    Starts num_threads full-image renders, each with its own copy of the
    camera and the target and an equal share of the samples. The first thread
    reports progress.
    """
    if num_threads < 1:
        return []

    samples_per_thread = samples / num_threads
    futures = []
    for i in range(num_threads):
        thread_camera = copy.copy(camera)
        thread_target = target.copy()
        futures.append(executor.submit(
            thread_camera.render, world, samples_per_thread, thread_target, log and i == 0))
    return futures


def combine_results(futures: List[Future], log: bool = False) -> Image:
    """
    Waits for every render thread and averages their images.
    """
    images = []
    for future in futures:
        try:
            images.append(future.result())
        except Exception as e:
            raise RenderError(f"Render thread failed: {e}") from e
    if log:
        print("combining images...")
    return Image.average(images)


class Renderer:
    """
    Splits the sample budget of a camera across a fixed number of threads.

    The scene graph is shared read-only by every thread; each thread renders
    the whole image into a private buffer and the buffers are averaged once
    all threads are done.
    """
    def __init__(self, camera: Camera, num_threads: Optional[int] = None, verbose: bool = True):
        self.camera = camera
        self.num_threads = num_threads if num_threads is not None else (os.cpu_count() or 1)
        self.verbose = verbose

    def render(self, world: Hittable, target: Image, samples: Optional[float] = None) -> Image:
        """
        Renders world into a new image shaped like target.

        Raises:
            RenderError: If any render thread raised.
            AveragingZeroImagesError: If num_threads is zero.
        """
        if samples is None:
            samples = self.camera.samples

        if self.verbose:
            print("starting render...")
        t = time.perf_counter()

        with ThreadPoolExecutor(max_workers=max(1, self.num_threads)) as executor:
            futures = start_render(executor, self.camera, world, target, samples,
                                   self.num_threads, log=self.verbose)
            result = combine_results(futures, log=self.verbose)

        if self.verbose:
            print(f"done in {(time.perf_counter() - t) * 1000:.0f}ms")
        return result

    def render_and_save(self, world: Hittable, target: Image, path: str,
                        samples: Optional[float] = None) -> Image:
        image = self.render(world, target, samples)
        if self.verbose:
            print(f"writing {path}...")
        image.save(path)
        return image
