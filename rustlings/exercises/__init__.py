"""Python reference solutions of the exercises, one module per topic."""