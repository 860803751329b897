# どこで: `src/surveyview/core/palettes.py`。
# 何を: HCL（polar CIE-Luv）色空間に基づくカラーパレット生成関数を提供する。
# なぜ: 点データ/グリッド描画の既定パレットを、知覚的に均等な色で用意するため。

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

# D65 白色点（Y=100 スケール）
_WHITE_XYZ = (95.047, 100.000, 108.883)

_XYZ_TO_LINEAR_RGB = np.array(
    [
        [3.240479, -1.537150, -0.498535],
        [-0.969256, 1.875992, 0.041556],
        [0.055648, -0.204043, 1.057311],
    ],
    dtype=np.float64,
)


def _white_uv() -> tuple[float, float]:
    xn, yn, zn = _WHITE_XYZ
    t = xn + yn + zn
    x = xn / t
    y = yn / t
    denom = 6.0 * y - x + 1.5
    return 2.0 * x / denom, 4.5 * y / denom


def _polar_luv_to_xyz(h: np.ndarray, c: np.ndarray, l: np.ndarray) -> np.ndarray:
    """(H, C, L) -> XYZ を返す。shape は (n, 3)。"""

    rad = np.deg2rad(h)
    u = c * np.cos(rad)
    v = c * np.sin(rad)

    yn = _WHITE_XYZ[1]
    y = np.where(l > 7.999592, yn * ((l + 16.0) / 116.0) ** 3, yn * l / 903.3)

    un, vn = _white_uv()
    with np.errstate(divide="ignore", invalid="ignore"):
        uu = u / (13.0 * l) + un
        vv = v / (13.0 * l) + vn
        x = 9.0 * y * uu / (4.0 * vv)
        z = -x / 3.0 - 5.0 * y + 3.0 * y / vv

    xyz = np.stack([x, y, z], axis=-1)
    # L <= 0 は黒
    xyz[l <= 0.0] = 0.0
    return xyz


def _gamma_encode(linear: np.ndarray) -> np.ndarray:
    return np.where(
        linear <= 0.0031308,
        12.92 * linear,
        1.055 * np.power(np.clip(linear, 0.0, None), 1.0 / 2.4) - 0.055,
    )


def hcl_to_hex(
    h: float | Sequence[float] | np.ndarray,
    c: float | Sequence[float] | np.ndarray,
    l: float | Sequence[float] | np.ndarray,
) -> list[str]:
    """HCL 値（ブロードキャスト可）を `#RRGGBB` の列へ変換して返す。

    Parameters
    ----------
    h : float | array-like
        色相（度）。
    c : float | array-like
        彩度。
    l : float | array-like
        輝度（0..100）。

    Returns
    -------
    list[str]
        sRGB の 16 進表記。色域外のチャンネルは 0..1 にクリップする。
    """

    hh, cc, ll = np.broadcast_arrays(
        np.atleast_1d(np.asarray(h, dtype=np.float64)),
        np.atleast_1d(np.asarray(c, dtype=np.float64)),
        np.atleast_1d(np.asarray(l, dtype=np.float64)),
    )
    xyz = _polar_luv_to_xyz(hh, cc, ll) / _WHITE_XYZ[1]
    linear = xyz @ _XYZ_TO_LINEAR_RGB.T
    rgb = np.clip(_gamma_encode(linear), 0.0, 1.0)
    rgb255 = np.rint(rgb * 255.0).astype(np.int64)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in rgb255.tolist()]


def rainbow_hcl(
    n: int,
    c: float = 50.0,
    l: float = 70.0,
    start: float = 0.0,
    end: float | None = None,
) -> list[str]:
    """彩度・輝度一定で色相だけを回す定性パレットを返す。

    `end` 省略時は色相環を n 等分する（最後の色が最初の色と重ならない）。
    """

    n = int(n)
    if n <= 0:
        return []
    if end is None:
        end = 360.0 * (n - 1) / n
    hue = np.linspace(float(start), float(end), n)
    return hcl_to_hex(hue, float(c), float(l))


def heat_hcl(
    n: int,
    h: tuple[float, float] = (0.0, 90.0),
    c: tuple[float, float] = (100.0, 30.0),
    l: tuple[float, float] = (50.0, 90.0),
    power: tuple[float, float] = (1.0 / 5.0, 1.0),
) -> list[str]:
    """色相・彩度・輝度を同時に変化させる逐次（heat 系）パレットを返す。"""

    n = int(n)
    if n <= 0:
        return []
    rval = np.linspace(1.0, 0.0, n)
    hue = h[1] - (h[1] - h[0]) * rval
    chroma = c[1] - (c[1] - c[0]) * rval ** power[0]
    lum = l[1] - (l[1] - l[0]) * rval ** power[1]
    return hcl_to_hex(hue, chroma, lum)


def point_palette(n: int, c: float = 80.0, l: float = 60.0, start: float = 0.0, end: float = 300.0) -> list[str]:
    """点データ用の既定パレット。"""

    return rainbow_hcl(n, c=c, l=l, start=start, end=end)


def grid_palette(
    n: int,
    h: tuple[float, float] = (300.0, 75.0),
    c: tuple[float, float] = (35.0, 95.0),
    l: tuple[float, float] = (15.0, 90.0),
    power: tuple[float, float] = (0.8, 1.2),
) -> list[str]:
    """グリッド（補間面）用の既定パレット。"""

    return heat_hcl(n, h=h, c=c, l=l, power=power)


__all__ = ["hcl_to_hex", "rainbow_hcl", "heat_hcl", "point_palette", "grid_palette"]
