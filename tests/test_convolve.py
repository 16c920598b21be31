# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

import unittest

import numpy as np
import scipy.signal

from volbp import convolve, kernels

try:
    import numba  # noqa: F401
    numba_available = True
except ImportError:
    numba_available = False


class TestConvolve(unittest.TestCase):
    engine = "python"

    def setUp(self):
        rs = np.random.RandomState(10)
        self.vol = rs.uniform(0, 10, (13, 11, 9))
        self.k0 = kernels.gaussian_kernel(0.8)
        self.k1 = kernels.boxcar_kernel(2)
        self.k2 = kernels.normalize([1., 3., 2.])

    def test_convolve_axis(self):
        """convolve.convolve_axis: compare to direct convolution"""
        for axis in range(3):
            shape = [1, 1, 1]
            shape[axis] = -1
            exp = scipy.signal.convolve(self.vol, self.k2.reshape(shape),
                                        mode="same", method="direct")
            res = convolve.convolve_axis(self.vol, self.k2, axis,
                                         engine=self.engine)
            np.testing.assert_allclose(res, exp, atol=1e-12)

    def test_convolve_axis_zero_padding(self):
        """convolve.convolve_axis: data outside is treated as 0"""
        vol = np.ones((5, 3, 3))
        res = convolve.convolve_axis(vol, [1/3, 1/3, 1/3], 0,
                                     engine=self.engine)
        np.testing.assert_allclose(res[0], 2/3)
        np.testing.assert_allclose(res[1:-1], 1)
        np.testing.assert_allclose(res[-1], 2/3)

    def test_separable(self):
        """convolve.separable_convolve: compare to outer product kernel"""
        full = np.einsum("i,j,k->ijk", self.k0, self.k1, self.k2)
        exp = scipy.signal.convolve(self.vol, full, mode="same",
                                    method="direct")
        res = convolve.separable_convolve(
            self.vol, [self.k0, self.k1, self.k2], engine=self.engine)
        self.assertEqual(res.shape, self.vol.shape)
        np.testing.assert_allclose(res, exp, atol=1e-10)

    def test_separable_single_kernel(self):
        """convolve.separable_convolve: same kernel along each axis"""
        res1 = convolve.separable_convolve(self.vol, self.k0,
                                           engine=self.engine)
        res2 = convolve.separable_convolve(self.vol, [self.k0] * 3,
                                           engine=self.engine)
        np.testing.assert_allclose(res1, res2)

    def test_separable_identity(self):
        """convolve.separable_convolve: identity kernel"""
        vol = self.vol.astype(np.uint8)
        res = convolve.separable_convolve(vol, [1.], engine=self.engine)
        np.testing.assert_array_equal(res, vol.astype(float))

    def test_no_side_effects(self):
        """convolve.separable_convolve: input is not modified"""
        orig = self.vol.copy()
        convolve.separable_convolve(self.vol, self.k0, engine=self.engine)
        np.testing.assert_array_equal(self.vol, orig)

    def test_invalid(self):
        """convolve.convolve_axis: invalid kernel and engine"""
        with self.assertRaises(ValueError):
            convolve.convolve_axis(self.vol, [0.5, 0.5], 0,
                                   engine=self.engine)
        with self.assertRaises(ValueError):
            convolve.convolve_axis(self.vol, self.k0, 0, engine="bla")
        with self.assertRaises(ValueError):
            convolve.separable_convolve(self.vol, [self.k0, self.k1],
                                        engine=self.engine)


@unittest.skipUnless(numba_available, "numba not available")
class TestConvolveNumba(TestConvolve):
    engine = "numba"

    def test_engines_agree(self):
        """convolve.separable_convolve: numba and python engines agree"""
        ks = [self.k0, self.k1, self.k2]
        res_py = convolve.separable_convolve(self.vol, ks, engine="python")
        res_nb = convolve.separable_convolve(self.vol, ks, engine="numba")
        np.testing.assert_allclose(res_nb, res_py, rtol=1e-12, atol=1e-12)


if __name__ == "__main__":
    unittest.main()
