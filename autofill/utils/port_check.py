"""
调试端口检测

连接浏览器前先确认调试地址可达，避免 DrissionPage 自行拉起新浏览器。
"""
import socket
from typing import Tuple

DEFAULT_HOST = '127.0.0.1'


def parse_address(addr: str) -> Tuple[str, int]:
    """
    拆分调试地址

    Args:
        addr: "host:port" 或 "port"

    Returns:
        (host, port)

    Raises:
        ValueError: 端口不是数字
    """
    host, sep, port = addr.strip().rpartition(':')
    if not sep:
        host = DEFAULT_HOST
    return host or DEFAULT_HOST, int(port)


class PortChecker:
    @staticmethod
    def is_port_open(port: int, host: str = DEFAULT_HOST, timeout: float = 0.5) -> bool:
        """纯 Socket 检测端口是否开启"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.settimeout(timeout)
            return s.connect_ex((host, port)) == 0

    @classmethod
    def is_address_open(cls, addr: str, timeout: float = 0.5) -> bool:
        """检测 "host:port" 形式的调试地址；格式错误视为不可达"""
        try:
            host, port = parse_address(addr)
        except ValueError:
            return False
        return cls.is_port_open(port, host, timeout)
