from neon_breakout.game import main

main()
