# coding: utf-8
"""
=========================
Frequency Magnitude Response
=========================

This notebook demonstrates how to visualize the frequency response
of the wavelet band filter (WaveletFilter) for several numbers of levels.
"""

#########################
# Standard imports
import torch
from matplotlib import pyplot as plt

import mallat
#########################################
# maximal number of scales
J = 5

# signal length
N = 2 ** 10

# The response to a centred impulse is the impulse response of the filter.
x = torch.zeros(N, dtype=torch.float64)
x[N // 2] = 1

#########################################################################
# Plot the spectrum of the filter for each number of scales.
plt.figure(figsize=(10, 3))
for j in range(1, J + 1):
    filt = mallat.WaveletFilter(mallat.DWTDirect(wavelet="sym8", J=j))
    y_hat = torch.fft.rfft(filt(x))
    plt.semilogx(torch.abs(y_hat), label=f"J={j}")
plt.grid(linestyle='--', alpha=0.5)
plt.xlim(1, N // 2)
plt.xlabel("Frequency")
plt.legend()
plt.title(f'mallat v{mallat.__version__}. Frequency Magnitude Response')
plt.show()
