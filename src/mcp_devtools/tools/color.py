"""Convert CSS color values to Hex, RGB, HSL, HSV, CMYK, LAB, XYZ and Linear RGB.

Accepts hex (#ff5733, #f53, #ff5733cc), rgb(255, 87, 51), hsl(9, 100%, 60%)
and a small table of named colors (red, blue, ...). Also reports a
luminance value and whether the color reads as light or dark.
"""

from pydantic import Field

from mcp_devtools.color.convert import ColorOutput, convert_color
from mcp_devtools.registry import Tool, ToolInput


class ColorInput(ToolInput):
    color: str = Field(
        description="CSS color value (e.g., '#ff5733', 'rgb(255, 87, 51)', 'hsl(9, 100%, 60%)', 'red')"
    )


tool = Tool(
    name="color_convert",
    description=(
        "Convert CSS color values to various color formats (Hex, RGB, HSL, HSV, CMYK, LAB, XYZ, Linear RGB). "
        "Supports hex (#ff5733), rgb(255, 87, 51), hsl(9, 100%, 60%), and named colors (red, blue, etc.)"
    ),
    input_model=ColorInput,
)


@tool.handler
def run(params: ColorInput) -> ColorOutput:
    return convert_color(params.color)
