"""
JavaScript 脚本存储模块 - 基础设施层实现

将所有在页面中执行的 JavaScript 代码集中管理。

模块结构:
- SET_NATIVE_VALUE: React/Angular 受控输入框写值 + 事件派发
"""

from typing import Final


class ScriptStore:
    """
    JavaScript 脚本存储

    集中管理所有 JavaScript 脚本，提供类型安全的访问方式。
    元素级脚本以元素为 this 执行，参数通过 arguments 传入。
    """

    # ============================================================
    # 原生 setter 写值
    # ============================================================
    # arguments[0]: 值, arguments[1]: 逗号分隔的事件名
    SET_NATIVE_VALUE: Final[str] = """
        const value = arguments[0];
        const events = (arguments[1] || '').split(',').filter(Boolean);
        try {
            const proto = this.tagName === 'TEXTAREA'
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const descriptor = Object.getOwnPropertyDescriptor(proto, 'value');
            if (descriptor && descriptor.set) {
                descriptor.set.call(this, value);
            } else {
                this.value = value;
            }
            events.forEach(type => {
                this.dispatchEvent(new Event(type, { bubbles: true }));
            });
            return { success: true, finalValue: this.value };
        } catch (e) {
            return { success: false, error: e.toString() };
        }
    """

