from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode, EmptySceneError
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import RotationY, Translation
from pathtracer.geometry.world import HittableList
