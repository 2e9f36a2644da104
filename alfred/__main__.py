from alfred.cli import main

raise SystemExit(main())
