"""Prompt templates per task — card styling (geometric / classic) and chart extraction."""

from __future__ import annotations

_CARD_SYSTEM = "你是一个极有想象力的设计师和语言分析师"

_CHART_SYSTEM = "你是一个出色的数据分析师与图表设计师，严禁编造不存在的数据"

_SVG_CARD_SHAPE = """只输出一个 JSON 对象，不要输出任何其他文字：
{{
  "theme": "geometric | minimalist | constructivist | bauhaus | abstract",
  "svgStyle": {{
    "backgroundColor": "#RRGGBB",
    "primaryColor": "#RRGGBB",
    "secondaryColor": "#RRGGBB",
    "patterns": [
      {{"type": "circle | rect | line | polygon | path | ellipse | polyline | arc | spiral | wave",
        "x": 0, "y": 0,
        "attributes": {{"fill": "#RRGGBB", "stroke": "#RRGGBB", "strokeWidth": 1, "opacity": 0.5}}}}
    ]
  }},
  "typography": {{"fontFamily": "serif-cn | kai-cn | elegant-cn", "fontSize": 18-24, "textColor": "#RRGGBB"}},
  "explanation": "设计理念解释"
}}
各图形类型需要的属性：rect: width、height；circle: r、cx、cy；ellipse: rx、ry；line: x2、y2；
polygon/polyline: points；path: d；arc: endx、endy、largearc、sweep；spiral: turns、spacing；
wave: amplitude、frequency、wavewidth。画布宽 672。"""

_CARD_GEOMETRIC_TEMPLATE = """请以极简主义设计师的视角分析这段文字，创造一个简洁典雅的Geometric abstraction风格设计方案。要求如下：

视觉元素：
• 灵活运用多样几何形状（圆、椭圆、方形、菱形、多边形、扇形、弧线）构建主视觉
• 可叠加、切割、渐变、穿插等手法创造层次
• 通过点、线、面的疏密变化营造韵律感
• 巧妙融入螺旋、波浪、放射状等动态图形

色彩规划：
• 主色调需呼应文本的情感氛围
• 搭配2-3个和谐的辅助色
• 考虑明暗对比和色彩饱和度的变化

构图原则：
• 遵循黄金分割或三分法则
• 注重画面的呼吸感和留白
• 确保视觉重心的平衡

整体风格：
• 保持克制与简约
• 让抽象设计与文本主题产生共鸣

""" + _SVG_CARD_SHAPE + """

文本内容：{text}"""

_CARD_STYLE_TEMPLATE = """分析这段文字的风格和内容，并提供合适的视觉设计参数：{text}

""" + _SVG_CARD_SHAPE

_CARD_CLASSIC_TEMPLATE = """分析这段文字的风格和内容，并提供合适的视觉设计参数：{text}

只输出一个 JSON 对象，不要输出任何其他文字：
{{
  "theme": "literary | philosophical | poetic | scientific | inspirational | artistic",
  "colorScheme": {{"primary": "#RRGGBB", "secondary": "#RRGGBB", "textColor": "#RRGGBB"}},
  "iconStyle": "minimal | decorative | classic",
  "fontSize": "sm | base | lg | xl | 2xl",
  "mood": "一个词描述情绪",
  "emphasis": ["需要强调的词语"],
  "fontFamily": "serif-cn | kai-cn | elegant-cn | sans-serif"
}}"""

_CHART_TEMPLATE = """请从下面的文本中提取可以绘制为 {chart_type} 图表的数据。
只使用文本中真实出现的数值；数值缺失时不要猜测。
每个数据系列包含 name 和 data（按顺序排列的 {{"x": 类别或时间, "y": 数值}}）。

只输出一个 JSON 对象，不要输出任何其他文字：
{{
  "chartType": "line | bar | pie | scatter",
  "data": {{
    "series": [{{"name": "系列名", "data": [{{"x": "标签", "y": 0}}]}}],
    "title": "图表标题",
    "xAxisLabel": "X轴名称",
    "yAxisLabel": "Y轴名称"
  }},
  "style": {{
    "theme": "default",
    "backgroundColor": "#RRGGBB",
    "primaryColor": "#RRGGBB",
    "secondaryColors": ["#RRGGBB"],
    "fontFamily": "sans-serif",
    "fontSize": 14,
    "showLegend": true,
    "showGrid": true,
    "animation": true
  }},
  "insights": ["对数据的简短洞察"]
}}

文本内容：{text}"""

_TEMPLATES = {
    "card_svg": _CARD_STYLE_TEMPLATE,
    "card_geometric": _CARD_GEOMETRIC_TEMPLATE,
    "card_classic": _CARD_CLASSIC_TEMPLATE,
    "chart": _CHART_TEMPLATE,
}

_SYSTEM_PROMPTS = {
    "card_svg": _CARD_SYSTEM,
    "card_geometric": _CARD_SYSTEM,
    "card_classic": _CARD_SYSTEM,
    "chart": _CHART_SYSTEM,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES.get(task, _CARD_STYLE_TEMPLATE)


def get_system_prompt(task: str) -> str:
    return _SYSTEM_PROMPTS.get(task, _CARD_SYSTEM)


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by task name."""
    return dict(_TEMPLATES)
