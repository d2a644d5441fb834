from tabpad.main import main

raise SystemExit(main())
