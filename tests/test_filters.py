"""
Tests for the realtime filters and their coefficient design
"""

import pytest
import filtertoolbox as ftb
import numpy as np
import scipy.signal as sig
from matplotlib.pyplot import close


def get_noise(length_samples: int = 500, seed: int = 0):
    return ftb.generators.noise(length_samples, 0.5, random_state=seed)


class TestFIRFilter:
    frequencies = [0.01, 0.1, 0.25, 0.4, 0.49]
    lengths = [1, 2, 5, 6, 31, 64]

    def test_lowpass_unity_dc_gain(self):
        for n in self.lengths:
            for f in self.frequencies:
                fir = ftb.FIRFilter(n).setup_low_pass(f)
                np.testing.assert_allclose(
                    np.sum(fir.get_coefficients()), 1.0, rtol=1e-12
                )

    def test_lowpass_values(self):
        n = 7
        f = 0.2
        fir = ftb.FIRFilter(n).setup_low_pass(f)
        center = (n - 1) / 2
        expected = np.zeros(n)
        for i in range(n):
            if i == center:
                expected[i] = 2 * f
            else:
                expected[i] = np.sin(2 * np.pi * f * (i - center)) / (
                    np.pi * (i - center)
                )
        expected /= np.sum(expected)
        np.testing.assert_allclose(fir.get_coefficients(), expected)

        # Linear phase
        h = fir.get_coefficients()
        np.testing.assert_allclose(h, h[::-1])

    def test_highpass_is_spectral_inversion(self):
        for n in [5, 6, 31]:
            lp = ftb.FIRFilter(n).setup_low_pass(0.15).get_coefficients()
            hp = ftb.FIRFilter(n).setup_high_pass(0.15).get_coefficients()
            center = (n - 1) // 2
            expected = -lp
            expected[center] = 1 - lp[center]
            np.testing.assert_allclose(hp, expected)

            # Zero gain at DC
            np.testing.assert_allclose(np.sum(hp), 0.0, atol=1e-12)

    def test_bandpass_is_difference_of_lowpasses(self):
        n = 41
        lp_low = ftb.FIRFilter(n).setup_low_pass(0.1).get_coefficients()
        lp_high = ftb.FIRFilter(n).setup_low_pass(0.3).get_coefficients()
        bp = ftb.FIRFilter(n).setup_band_pass(0.1, 0.3).get_coefficients()
        np.testing.assert_allclose(bp, lp_high - lp_low)

    def test_invalid_frequencies(self):
        fir = ftb.FIRFilter(11).setup_low_pass(0.2)
        before = fir.get_coefficients()
        for f in [0.0, 0.5, -0.1, 0.7, np.nan]:
            with pytest.raises(ValueError):
                fir.setup_low_pass(f)
            with pytest.raises(ValueError):
                fir.setup_high_pass(f)
        with pytest.raises(ValueError):
            fir.setup_band_pass(0.3, 0.1)
        with pytest.raises(ValueError):
            fir.setup_band_pass(0.2, 0.2)
        with pytest.raises(ValueError):
            fir.setup_band_pass(0.1, 0.6)
        with pytest.raises(ValueError):
            fir.setup_band_pass(0.0, 0.2)

        # Nothing changed
        np.testing.assert_array_equal(before, fir.get_coefficients())

    def test_setup_filter_dispatch(self):
        n = 21
        np.testing.assert_array_equal(
            ftb.FIRFilter.from_design(
                n, ftb.FilterPassType.Lowpass, 0.2
            ).get_coefficients(),
            ftb.FIRFilter(n).setup_low_pass(0.2).get_coefficients(),
        )
        np.testing.assert_array_equal(
            ftb.FIRFilter.from_design(
                n, ftb.FilterPassType.Highpass, 0.2
            ).get_coefficients(),
            ftb.FIRFilter(n).setup_high_pass(0.2).get_coefficients(),
        )
        np.testing.assert_array_equal(
            ftb.FIRFilter.from_design(
                n, ftb.FilterPassType.Bandpass, (0.1, 0.2)
            ).get_coefficients(),
            ftb.FIRFilter(n).setup_band_pass(0.1, 0.2).get_coefficients(),
        )
        with pytest.raises(ValueError):
            ftb.FIRFilter(n).setup_filter(ftb.FilterPassType.Bandpass, 0.1)
        with pytest.raises(TypeError):
            ftb.FIRFilter(n).setup_filter("lowpass", 0.1)

    def test_impulse_response(self):
        # Impulse reproduces the coefficients followed by zeros
        fir = ftb.FIRFilter(5).setup_low_pass(0.1)
        impulse = np.zeros(15)
        impulse[0] = 1.0
        fir.process(impulse, len(impulse))
        np.testing.assert_allclose(impulse[:5], fir.get_coefficients())
        np.testing.assert_array_equal(impulse[5:], 0.0)

        # Asymmetric taps to check the ordering
        fir = ftb.FIRFilter(4).set_coefficients([1.0, 2.0, 3.0, 4.0])
        d = ftb.generators.dirac(10)
        fir.process(d)
        np.testing.assert_array_equal(
            d.time_data, [1.0, 2.0, 3.0, 4.0, 0, 0, 0, 0, 0, 0]
        )

    def test_against_lfilter(self):
        b = np.array([0.5, -0.2, 0.1, 0.7, -0.3])
        fir = ftb.FIRFilter(len(b)).set_coefficients(b)
        n = get_noise()
        td = n.time_data.copy()
        fir.process(td)
        np.testing.assert_allclose(td, sig.lfilter(b, [1.0], n.time_data))

    def test_streaming_in_blocks(self):
        n = get_noise(301)
        fir = ftb.FIRFilter(16).setup_band_pass(0.05, 0.2)
        reference = fir.copy().process(n.time_data.copy())

        td = n.time_data.copy()
        for start in range(0, len(td), 37):
            block = td[start : start + 37]
            fir.process(block)
        np.testing.assert_allclose(td, reference)

    def test_reset(self):
        fir = ftb.FIRFilter(6).setup_high_pass(0.2)
        coefficients = fir.get_coefficients()
        fir.process(get_noise(20).time_data)
        assert fir.head == 20 % 6
        fir.reset()
        assert fir.head == 0
        np.testing.assert_array_equal(fir.state, 0.0)
        np.testing.assert_array_equal(fir.get_coefficients(), coefficients)

        # Silence stays silent after reset
        silence = np.zeros(12)
        fir.process(silence)
        np.testing.assert_array_equal(silence, 0.0)

        # Impulse response is reproduced again
        d = ftb.generators.dirac(6)
        fir.process(d)
        np.testing.assert_allclose(d.time_data, coefficients)

    def test_copy_and_equality(self):
        fir = ftb.FIRFilter(8).setup_low_pass(0.2)
        fir.process(get_noise(5).time_data)
        fir2 = fir.copy()
        assert fir == fir2

        fir2.process(get_noise(3).time_data)
        assert fir != fir2

        fir2 = fir.copy()
        fir2.setup_low_pass(0.3)
        assert fir != fir2
        np.testing.assert_allclose(np.sum(fir.get_coefficients()), 1.0)

    def test_float32(self):
        fir = ftb.FIRFilter(15, dtype=np.float32).setup_low_pass(0.2)
        assert fir.get_coefficients().dtype == np.float32
        np.testing.assert_allclose(
            np.sum(fir.get_coefficients()), 1.0, rtol=1e-5
        )
        td = get_noise(50).time_data.astype(np.float32)
        fir.process(td)
        assert td.dtype == np.float32

    def test_frequency_response(self):
        fir = ftb.FIRFilter(51).setup_low_pass(0.1)
        f, h = fir.get_frequency_response(512)
        assert f[0] == 0.0
        assert f[-1] < 0.5
        np.testing.assert_allclose(np.abs(h[0]), 1.0)
        assert np.all(np.abs(h[f > 0.3]) < 0.1)

        fir = ftb.FIRFilter(51).setup_high_pass(0.1)
        f, h = fir.get_frequency_response(512)
        np.testing.assert_allclose(np.abs(h[0]), 0.0, atol=1e-10)

        fir = ftb.FIRFilter(51).setup_band_pass(0.1, 0.3)
        f, h = fir.get_frequency_response(512)
        np.testing.assert_allclose(np.abs(h[0]), 0.0, atol=1e-10)
        assert np.abs(h[np.argmin(np.abs(f - 0.2))]) > 0.9

    def test_plots(self):
        fir = ftb.FIRFilter(31).setup_low_pass(0.2)
        fir.plot_magnitude()
        fir.plot_coefficients()
        close("all")


class TestIIRFilter:
    # Second-order Butterworth low-pass
    b = np.array([0.02008337, 0.04016673, 0.02008337])
    a = np.array([-1.56101808, 0.64135154])

    def get_filter(self) -> ftb.IIRFilter:
        iir = ftb.IIRFilter(3, 2)
        iir.set_coefficients(self.b, self.a)
        return iir

    def test_coefficients_layout(self):
        iir = self.get_filter()
        assert len(iir) == 5
        np.testing.assert_array_equal(
            iir.get_coefficients(), np.hstack([self.b, self.a])
        )
        np.testing.assert_array_equal(iir.b, self.b)
        np.testing.assert_array_equal(iir.a, self.a)
        b, a = iir.ba
        np.testing.assert_array_equal(a, np.hstack([1.0, self.a]))

        # Full vector works as well
        iir2 = ftb.IIRFilter(3, 2)
        iir2.set_coefficients(np.hstack([self.b, self.a]))
        assert iir == iir2

        with pytest.raises(ValueError):
            iir.set_coefficients(self.b[:2], self.a)
        with pytest.raises(ValueError):
            iir.set_coefficients(self.b, np.hstack([self.a, 0.1]))
        with pytest.raises(ValueError):
            iir.set_coefficients(self.b)
        np.testing.assert_array_equal(
            iir.get_coefficients(), np.hstack([self.b, self.a])
        )

    def test_impulse_first_sample(self):
        iir = self.get_filter()
        d = ftb.generators.dirac(30)
        iir.process(d)
        assert d[0] == self.b[0]
        np.testing.assert_allclose(
            d.time_data,
            sig.lfilter(self.b, np.hstack([1.0, self.a]), np.eye(30)[0]),
        )

    def test_against_lfilter(self):
        n = get_noise()
        iir = self.get_filter()
        td = n.time_data.copy()
        iir.process(td)
        np.testing.assert_allclose(
            td, sig.lfilter(self.b, np.hstack([1.0, self.a]), n.time_data)
        )

        # Different number of coefficients
        b, a = sig.butter(4, 0.2, btype="highpass")
        iir = ftb.IIRFilter(len(b), len(a) - 1)
        iir.set_coefficients(b, a[1:])
        td = n.time_data.copy()
        iir.process_sequence(td)
        np.testing.assert_allclose(td, sig.lfilter(b, a, n.time_data))

    def test_linearity_and_time_invariance(self):
        x = get_noise(200, seed=1).time_data
        y = get_noise(200, seed=2).time_data
        alpha, beta = 0.7, -2.5

        combined = self.get_filter().process(alpha * x + beta * y)
        separate = alpha * self.get_filter().process(
            x.copy()
        ) + beta * self.get_filter().process(y.copy())
        np.testing.assert_allclose(combined, separate, atol=1e-12)

        # Delayed input gives a delayed output
        delay = 13
        x_delayed = np.hstack([np.zeros(delay), x])
        out = self.get_filter().process(x.copy())
        out_delayed = self.get_filter().process(x_delayed)
        np.testing.assert_allclose(out_delayed[delay:], out, atol=1e-12)
        np.testing.assert_array_equal(out_delayed[:delay], 0.0)

    def test_no_feedback(self):
        iir = ftb.IIRFilter(3, 0)
        iir.set_coefficients([0.25, 0.5, 0.25], [])
        fir = ftb.FIRFilter(3).set_coefficients([0.25, 0.5, 0.25])
        n = get_noise(100)
        np.testing.assert_allclose(
            iir.process(n.time_data.copy()), fir.process(n.time_data.copy())
        )

    def test_reset_zeroes_coefficients(self):
        iir = self.get_filter()
        iir.process(get_noise(10).time_data)
        iir.reset()
        np.testing.assert_array_equal(iir.get_coefficients(), 0.0)
        for h in iir.state:
            np.testing.assert_array_equal(h, 0.0)

        n = get_noise(50).time_data
        with pytest.warns(UserWarning):
            iir.process(n)
        np.testing.assert_array_equal(n, 0.0)

        # Silent processing still fills the input history
        assert np.any(iir.state[0])
        np.testing.assert_array_equal(iir.state[1], 0.0)

        # Works again after resetting and setting coefficients
        iir.reset()
        iir.set_coefficients(self.b, self.a)
        d = ftb.generators.dirac(5)
        iir.process(d)
        assert d[0] == self.b[0]

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            ftb.IIRFilter(0, 2)
        with pytest.raises(ValueError):
            ftb.IIRFilter(2, -1)
        with pytest.raises(TypeError):
            ftb.IIRFilter(2, 2, dtype=np.int32)
        with pytest.raises(ValueError):
            ftb.IIRFilter(2, 2, name="")

    def test_copy_independence(self):
        iir = self.get_filter()
        iir.process(get_noise(10).time_data)
        iir2 = iir.copy()
        assert iir == iir2
        iir2.reset()
        np.testing.assert_array_equal(
            iir.get_coefficients(), np.hstack([self.b, self.a])
        )
        assert iir != iir2

    def test_metadata(self):
        iir = self.get_filter()
        assert iir.metadata["n_b"] == 3
        assert iir.metadata["n_a"] == 2
        assert "IIRFilter" in str(iir)


class TestFilterChain:
    def test_chain(self):
        fir = ftb.FIRFilter(9).setup_low_pass(0.25)
        iir = ftb.IIRFilter(3, 2)
        iir.set_coefficients(
            [0.02008337, 0.04016673, 0.02008337], [-1.56101808, 0.64135154]
        )
        chain = ftb.FilterChain([fir.copy(), iir.copy()])
        assert chain.n_filters == 2

        n = get_noise(200).time_data
        expected = iir.process(fir.process(n.copy()))
        out = chain.process(n.copy())
        np.testing.assert_allclose(out, expected)

        b, a = chain.ba
        np.testing.assert_allclose(out, sig.lfilter(b, a, n))

        chain.reset()
        with pytest.warns(UserWarning):
            out2 = chain.process_sequence(list(n))
        np.testing.assert_allclose(out2, np.zeros(len(n)))

    def test_invalid_chain(self):
        with pytest.raises(ValueError):
            ftb.FilterChain([])
        with pytest.raises(TypeError):
            ftb.FilterChain([ftb.Window(4)])

    def test_chain_validation(self):
        fir = ftb.FIRFilter(3).set_coefficients([1.0, 1.0, 1.0])
        chain = ftb.FilterChain([fir])
        with pytest.raises(TypeError):
            chain.process(np.arange(5))
        with pytest.raises(TypeError):
            chain.process_sequence((1.0, 2.0))
        np.testing.assert_array_equal(fir.state, 0.0)

        # Silent filters inside the chain are reported
        chain = ftb.FilterChain([fir, ftb.FIRFilter(2)])
        with pytest.warns(UserWarning):
            chain.process(np.ones(4))
