"""伝票の画像レンダリング"""

from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from .models import Slip


def slip_lines(slip: Slip) -> list[str]:
    """伝票の明細行（商品コード・商品名・棚番・数量）"""
    lines = []
    for i, task in enumerate(slip.tasks, start=1):
        product = task.product
        parts = [f"{i:>2}.", str(product["code"])]
        if product.get("name"):
            parts.append(str(product["name"]))
        if product.get("location"):
            parts.append(f"[{product['location']}]")
        parts.append(f"x{task.quantity}")
        lines.append("  ".join(parts))
    return lines


def render_slip_image(
    slip: Slip,
    font_size: int = 20,
    width: int = 640,
    padding: int = 20,
    bg_color: str = "white",
    text_color: str = "black",
) -> Image.Image:
    """伝票をピッキングリストの画像にレンダリング。

    Args:
        slip: Slip
        font_size: フォントサイズ
        width: 画像幅 (px)
        padding: 余白 (px)

    Returns:
        PIL.Image
    """
    font = _find_font(font_size)
    bold_font = _find_font(int(font_size * 1.4), bold=True)

    line_height = font_size + 6
    bold_line_height = int(font_size * 1.4) + 8
    rule_height = 12

    lines = slip_lines(slip)

    # ヘッダー + 罫線 + 明細 + 罫線 + フッター
    total_height = (
        padding
        + bold_line_height
        + rule_height
        + line_height * max(len(lines), 1)
        + rule_height
        + line_height
        + padding
    )

    img = Image.new("RGB", (width, total_height), bg_color)
    draw = ImageDraw.Draw(img)
    y = padding

    draw.text((padding, y), f"伝票 No.{slip.slip_number}", fill=text_color, font=bold_font)
    y += bold_line_height

    draw.line([(padding, y + rule_height // 2), (width - padding, y + rule_height // 2)], fill=text_color)
    y += rule_height

    if lines:
        for line in lines:
            draw.text((padding, y), line, fill=text_color, font=font)
            y += line_height
    else:
        draw.text((padding, y), "（在庫切れ）", fill=text_color, font=font)
        y += line_height

    draw.line([(padding, y + rule_height // 2), (width - padding, y + rule_height // 2)], fill=text_color)
    y += rule_height

    total_qty = sum(t.quantity for t in slip.tasks)
    draw.text(
        (padding, y), f"{len(slip.tasks)} 品目 / 合計 {total_qty} 点",
        fill=text_color, font=font,
    )

    return img


def save_slip_images(
    slips: list[Slip],
    output_dir: Union[str, Path] = ".",
    prefix: str = "slip",
    **render_kwargs,
) -> list[Path]:
    """伝票を1枚ずつ画像ファイルとして保存。

    Returns:
        保存先 Path のリスト（slip_1.png, slip_2.png, ...）
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    saved = []
    for slip in slips:
        img = render_slip_image(slip, **render_kwargs)
        filepath = out / f"{prefix}_{slip.slip_number}.png"
        img.save(str(filepath))
        saved.append(filepath)
    return saved


def _find_font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont:
    """利用可能な日本語フォントを探す。"""
    if bold:
        font_paths = [
            "/usr/share/fonts/opentype/noto/NotoSansCJK-Bold.ttc",
            "/usr/share/fonts/truetype/noto/NotoSansCJK-Bold.ttc",
            "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/truetype/noto/NotoSansCJK-Regular.ttc",
            # macOS
            "/System/Library/Fonts/ヒラギノ角ゴシック W6.ttc",
        ]
    else:
        font_paths = [
            "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/truetype/noto/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/google-noto-cjk/NotoSansCJK-Regular.ttc",
            # macOS
            "/System/Library/Fonts/ヒラギノ角ゴシック W3.ttc",
            "/Library/Fonts/Osaka.ttf",
            # Fallback
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        ]
    for path in font_paths:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()
