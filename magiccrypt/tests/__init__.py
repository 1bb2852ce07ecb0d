"""magiccrypt tests"""
