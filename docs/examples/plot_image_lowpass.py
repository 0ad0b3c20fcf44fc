# coding: utf-8
"""
=========================
Image denoising by blending
=========================

We low-pass several noisy copies of the same image with a 2-D wavelet
band filter, then blend the copies in the wavelet domain. Averaging the
copies removes most of the noise that survives the band filter.
"""

################################################################################
# Standard imports
import matplotlib.pyplot as plt
import numpy as np
import torch

import mallat


################################################################################
# A synthetic image: a bright disk on a smooth gradient.
H, W = 96, 128
yy, xx = np.mgrid[0:H, 0:W]
image = 0.5 * xx / W + ((yy - H / 2) ** 2 + (xx - W / 2) ** 2 < 30 ** 2)
image = torch.tensor(image, dtype=torch.float64)

noisy = [image + 0.3 * torch.randn(H, W, dtype=torch.float64) for _ in range(8)]

################################################################################
# Attenuate the two finest scales and blend.
filt = mallat.WaveletFilter(mallat.DWT2DDirect(wavelet="bior2.2", J=2), factor=-0.9)
single = filt(noisy[0])
blended = filt(noisy)

################################################################################
# Display.
fig, axes = plt.subplots(1, 4, figsize=(12, 3))
for ax, img, title in zip(
    axes,
    [image, noisy[0], single, blended],
    ["original", "noisy", "band filter", "blend of 8"],
):
    ax.imshow(img.numpy(), cmap="gray")
    ax.set_title(title)
    ax.axis("off")
fig.suptitle(f"mallat v{mallat.__version__}")
plt.show()
