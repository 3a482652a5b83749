from cssblocks.transforms.block_rewrite import BlockRewriter, CompileResult, compile_css

__all__ = ["BlockRewriter", "CompileResult", "compile_css"]
