# (input hue, expected normalized hue)
samples_hue = {
    0.0: 0.0,
    30.0: 30.0,
    359.5: 359.5,
    360.0: 0.0,
    370.0: 10.0,
    720.0: 0.0,
    1000.0: 280.0,
    -30.0: 330.0,
    -360.0: 0.0,
    -400.0: 320.0,
    -720.0: 0.0,
    -750.0: 330.0,
}

# (input s or l, expected clamped value)
samples_unit = {
    -1.0: 0.0,
    -0.0001: 0.0,
    0.0: 0.0,
    0.25: 0.25,
    1.0: 1.0,
    1.5: 1.0,
    50.0: 1.0,
}

# (h, s, l) -> text
samples_text = {
    (120.0, 0.5, 0.25): "120.0°;50.0%;25.0%",
    (0.0, 0.0, 0.0): "0.0°;0.0%;0.0%",
    (359.5, 1.0, 1.0): "359.5°;100.0%;100.0%",
    (45.0, 0.125, 0.75): "45.0°;12.5%;75.0%",
}
