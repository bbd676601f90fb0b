from pwconfig.cli import main

raise SystemExit(main())
