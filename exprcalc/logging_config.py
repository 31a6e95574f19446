# logging_config.py

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(log_path=None, level=logging.INFO) -> logging.Logger:
    """콘솔과 (지정 시) 파일(UTF-8)로 동시에 로그를 남기는 'exprcalc' 로거를 설정한다."""
    logger = logging.getLogger('exprcalc')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # 콘솔(stderr)
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
