# src/depinsight/utils/color_utils.py
"""
提供與顏色處理相關的公用函式。
"""

# 1. 標準庫導入
import colorsys
import functools
import hashlib

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


@functools.lru_cache(maxsize=None)
def color_for(name: str) -> str:
    """
    根據名稱的 SHA-1 雜湊，推導出一個確定性的淺色。

    雜湊的最低位元組決定色相，次低位元組決定飽和度 (10%~60%)，明度固定為 100%。
    相同名稱在任何執行中都會得到相同顏色。

    Args:
        name: 任意名稱字串，通常為套件的頂層名稱。

    Returns:
        大寫十六進位顏色字串 (例如 "#FFF1D9")。
    """
    digest = int(hashlib.sha1(name.encode("utf-8")).hexdigest(), 16)
    hue = int((digest & 0xFF) / 255.0 * 359)
    saturation = int(((digest >> 8) & 0xFF) / 255.0 * 50 + 10)
    brightness = 100

    r, g, b = colorsys.hsv_to_rgb(hue / 360.0, saturation / 100.0, brightness / 100.0)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"


def get_analogous_dark_color(hex_color: str) -> str:
    """
    根據給定的十六進位背景色，計算一個相似的、更深的、醒目的邊框顏色。

    Args:
        hex_color: 十六進位顏色字串 (例如 "#RRGGBB")。

    Returns:
        一個相似深色的十六進位顏色字串。
    """
    hex_color = hex_color.lstrip("#")
    r, g, b = tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))

    hue, lightness, saturation = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)

    dark_l = max(0.1, lightness * 0.3)
    dark_s = min(1.0, saturation * 1.2)

    cr, cg, cb = colorsys.hls_to_rgb(hue, dark_l, dark_s)

    return f"#{int(cr * 255):02x}{int(cg * 255):02x}{int(cb * 255):02x}"
