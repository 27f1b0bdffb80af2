"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    "allow_partial": True,  # 栈中剩余多个值时返回栈顶
    "cache_size": 256,      # ExpressionEvaluator 缓存的表达式数量
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行输出
CLI_CONFIG = {
    "output_format": "fraction",  # fraction / decimal / both
    "precision": 15,              # decimal 输出的有效位数
}

OUTPUT_FORMATS = ("fraction", "decimal", "both")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(EVALUATOR_CONFIG["allow_partial"], bool), "allow_partial必须是布尔值"
    assert EVALUATOR_CONFIG["cache_size"] > 0, "cache_size必须为正"
    assert CLI_CONFIG["output_format"] in OUTPUT_FORMATS, f"output_format必须是{OUTPUT_FORMATS}之一"
    assert 1 <= CLI_CONFIG["precision"] <= 17, "precision必须在1到17之间"
    assert hasattr(logging, LOGGING_CONFIG["level"]), "未知的日志级别"
    logger.debug("Configuration validated successfully!")
