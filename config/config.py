"""配置文件"""
import logging
import math

logger = logging.getLogger(__name__)

# 表达式引擎参数
ENGINE_CONFIG = {
    # 识别的常数，按整词替换
    "constants": {
        "pi": math.pi,
        "e": math.e,
    },
}

# 极限与连续性参数
LIMIT_CONFIG = {
    "step": 1e-5,  # h，左右逼近的步长
    "tolerance": 1e-5,  # 左右极限相等的判定阈值
    "extrapolate": True,  # 单侧估计使用 2*f(p±h) - f(p±2h)
}

# 定积分参数（复合梯形公式）
INTEGRATION_CONFIG = {
    "slices": 1000,  # 固定子区间数
}

# 导数参数
DERIVATIVE_CONFIG = {
    "step": 1e-3,  # 有限差分步长
    "max_order": 10,
}

# 交互式 shell 参数
SHELL_CONFIG = {
    "prompt": "\nEnter command: ",
    "default_variable": "x",  # integrate/limit/continuity 命令使用的变量
    "history_size": 1000,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LIMIT_CONFIG["step"] > 0, "limit step must be positive"
    assert LIMIT_CONFIG["tolerance"] > 0, "limit tolerance must be positive"
    assert INTEGRATION_CONFIG["slices"] >= 1, "integration needs at least one slice"
    assert DERIVATIVE_CONFIG["step"] > 0, "finite difference step must be positive"
    assert DERIVATIVE_CONFIG["max_order"] >= 1
    assert SHELL_CONFIG["default_variable"].isalpha()
    for name in ENGINE_CONFIG["constants"]:
        assert name.isalpha(), f"constant name must be alphabetic: {name}"
    logger.debug("Configuration validated successfully!")
