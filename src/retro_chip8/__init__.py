"""
retro_chip8: 8ビット仮想マシン（CHIP-8命令セット）のインタプリタ・コア。
"""
