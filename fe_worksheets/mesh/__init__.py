# fe_worksheets/mesh - Static geometry input for an external mesher
from .patch_test import PatchTestGeometry, patch_test_geometry, build_gmsh_model

__all__ = ['PatchTestGeometry', 'patch_test_geometry', 'build_gmsh_model']
